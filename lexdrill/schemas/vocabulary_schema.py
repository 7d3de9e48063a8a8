"""Pydantic schemas for the vocabulary bank and its SRS metadata."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lexdrill.utils.time_utils import as_utc, utcnow


def _new_id() -> str:
    return str(uuid.uuid4())


class SrsData(BaseModel):
    """Spaced-repetition metadata attached once an item has been reviewed."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=_new_id)
    # Name of the algorithm that produced the intervals; not interpreted here
    algorithm: str = Field(default="sm2", min_length=1)
    streak: int = Field(default=0, ge=0)
    interval_hours: float = Field(default=0.0, ge=0)
    ease_factor: float = Field(default=2.5, gt=0)
    due_at: datetime
    last_reviewed_at: Optional[datetime] = None

    @field_validator("due_at", "last_reviewed_at")
    @classmethod
    def _to_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value) if value is not None else None


class ActivityPerformance(BaseModel):
    correct_count: int = Field(default=0, ge=0)
    incorrect_count: int = Field(default=0, ge=0)
    last_attempt_at: Optional[datetime] = None

    @property
    def total(self) -> int:
        return self.correct_count + self.incorrect_count


class PerformanceData(BaseModel):
    """Recognition (flashcards) and production (translation) counters."""

    recognition: ActivityPerformance = Field(default_factory=ActivityPerformance)
    production: ActivityPerformance = Field(default_factory=ActivityPerformance)


class VocabItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=_new_id)
    term: str = Field(min_length=1)
    reading: Optional[str] = None
    meaning: str = Field(min_length=1)
    examples: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    folders: List[str] = Field(default_factory=list)
    level: str = "A1"
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    srs_data: Optional[SrsData] = None
    performance_data: Optional[PerformanceData] = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


__all__ = [
    "SrsData",
    "ActivityPerformance",
    "PerformanceData",
    "VocabItem",
]
