# Fichier: lexdrill/models/drill_session_model.py

from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from lexdrill.db.base_class import Base


class DrillSessionRecord(Base):
    """
    A completed drill session: which items were practised and how it went.
    """
    __tablename__ = "drill_sessions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    vocab_item_ids: Mapped[list[str]] = mapped_column(JSON, default=list)

    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    ended_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)

    # Normalised between 0 and 1
    score: Mapped[float] = mapped_column(Float, default=0.0)
    correct_count: Mapped[int] = mapped_column(Integer, default=0)
    incorrect_count: Mapped[int] = mapped_column(Integer, default=0)
