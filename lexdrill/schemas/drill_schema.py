"""Schemas for drill queues, review outcomes and drill sessions."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from lexdrill.schemas.vocabulary_schema import PerformanceData, SrsData, VocabItem
from lexdrill.utils.time_utils import as_utc, utcnow


class DrillSelection(BaseModel):
    """Ordered practice queue plus the size of each bucket before truncation."""

    queue: List[VocabItem] = Field(default_factory=list)
    due_count: int = 0
    upcoming_count: int = 0
    new_count: int = 0


ReviewMode = Literal["review_only", "mixed", "new_only"]


class ReviewSelection(BaseModel):
    """Items picked for a fixed-size session in one review mode.

    ``status`` is ``empty`` when nothing can be drilled and ``insufficient``
    when review-only practice asks for more items than the bank holds.
    """

    status: Literal["ok", "empty", "insufficient"]
    review_mode: ReviewMode
    items: List[VocabItem] = Field(default_factory=list)
    message: Optional[str] = None


ActivityType = Literal["recognition", "production"]


class ActivityOutcome(BaseModel):
    """Result of one practice attempt on a vocabulary item."""

    activity_type: ActivityType
    was_correct: bool
    # Graded activities (translation) report a score between 0 and 1
    score: Optional[float] = Field(default=None, ge=0, le=1)
    attempted_at: datetime = Field(default_factory=utcnow)

    @field_validator("attempted_at")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class Sm2ReviewResult(BaseModel):
    algorithm: str
    ease_factor: float
    interval_hours: float
    streak: int
    due_at: datetime
    last_reviewed_at: datetime
    was_successful: bool


class SrsUpdateResult(BaseModel):
    srs_data: SrsData
    performance_data: PerformanceData


class DrillSession(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    vocab_item_ids: List[str] = Field(default_factory=list)
    started_at: datetime
    ended_at: datetime
    score: float = Field(ge=0, le=1)
    correct_count: int = Field(default=0, ge=0)
    incorrect_count: int = Field(default=0, ge=0)

    model_config = {"from_attributes": True}

    @field_validator("started_at", "ended_at")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @model_validator(mode="after")
    def _check_chronology(self) -> "DrillSession":
        if self.ended_at < self.started_at:
            raise ValueError("ended_at must not precede started_at")
        return self


__all__ = [
    "ActivityOutcome",
    "ActivityType",
    "DrillSelection",
    "DrillSession",
    "ReviewMode",
    "ReviewSelection",
    "Sm2ReviewResult",
    "SrsUpdateResult",
]
