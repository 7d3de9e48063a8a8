"""Pydantic schemas for learner progress endpoints."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ProgressStats(BaseModel):
    user_id: str
    total_vocab_count: int = 0
    learned_vocab_count: int = 0
    review_due_count: int = 0
    streak_days: int = 0
    last_session_at: Optional[datetime] = None


class ActivitySummary(BaseModel):
    correct: int = 0
    incorrect: int = 0
    total: int = 0
    accuracy: Optional[float] = None


class OverallSummary(BaseModel):
    mastery: Optional[float] = None
    is_mastered: bool = False
    streak: int = 0
    days_until_due: Optional[float] = None
    is_due: bool = False


class PerformanceSummary(BaseModel):
    recognition: ActivitySummary
    production: ActivitySummary
    overall: OverallSummary
