"""Vocabulary bank entries saved by the learner."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexdrill.db.base_class import Base

if TYPE_CHECKING:
    from .srs_record_model import SrsRecord


class VocabularyItem(Base):
    __tablename__ = "vocabulary_items"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    term: Mapped[str] = mapped_column(String, nullable=False)
    reading: Mapped[Optional[str]] = mapped_column(String)
    meaning: Mapped[str] = mapped_column(Text, nullable=False)
    examples: Mapped[list[str]] = mapped_column(JSON, default=list)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list)
    folders: Mapped[list[str]] = mapped_column(JSON, default=list)
    level: Mapped[str] = mapped_column(String(16), default="A1")

    # Per-activity counters (recognition / production), stored as-is
    performance_data: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    # --- Relations ---
    srs_record: Mapped[Optional["SrsRecord"]] = relationship(
        back_populates="vocabulary_item",
        cascade="all, delete-orphan",
        uselist=False,
    )


__all__ = ["VocabularyItem"]
