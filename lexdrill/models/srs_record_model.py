"""SRS scheduling data per vocabulary item."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexdrill.db.base_class import Base


class SrsRecord(Base):
    """Stores spaced-repetition planning metadata for a vocabulary item."""

    __tablename__ = "srs_records"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    vocab_item_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("vocabulary_items.id", ondelete="CASCADE"),
        unique=True,
        index=True,
    )

    algorithm: Mapped[str] = mapped_column(String(20), default="sm2")
    streak: Mapped[int] = mapped_column(Integer, default=0)
    interval_hours: Mapped[float] = mapped_column(Float, default=0.0)
    ease_factor: Mapped[float] = mapped_column(Float, default=2.5)

    due_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    last_reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    vocabulary_item = relationship("VocabularyItem", back_populates="srs_record")


__all__ = ["SrsRecord"]
