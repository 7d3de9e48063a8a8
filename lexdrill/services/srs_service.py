"""Unified spaced-repetition updates for recognition and production practice."""

from __future__ import annotations

import logging
import math
import random
import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from lexdrill.core.config import settings
from lexdrill.crud import vocabulary_crud
from lexdrill.schemas.drill_schema import (
    ActivityOutcome,
    DrillSelection,
    ReviewMode,
    ReviewSelection,
    SrsUpdateResult,
)
from lexdrill.schemas.progress_schema import ActivitySummary, OverallSummary, PerformanceSummary
from lexdrill.schemas.vocabulary_schema import (
    ActivityPerformance,
    PerformanceData,
    SrsData,
    VocabItem,
)
from lexdrill.services.drill_selector import select_drill_queue
from lexdrill.services.review_selection import build_review_selection
from lexdrill.services.sm2_engine import calculate_sm2_review
from lexdrill.utils.time_utils import as_utc, utcnow

logger = logging.getLogger(__name__)

RECOGNITION_WEIGHT = 0.4
PRODUCTION_WEIGHT = 0.6
MASTERY_THRESHOLD = 0.8
MASTERY_MIN_CORRECT = 3
MASTERY_MIN_STREAK = 2

# (minimum score, SM-2 quality), checked top-down
_PRODUCTION_QUALITY_STEPS = (
    (0.9, 5),
    (0.7, 4),
    (0.5, 3),
    (0.3, 2),
)


# ----------------------------------------------------------------------
# Pure helpers
# ----------------------------------------------------------------------
def map_outcome_to_quality(outcome: ActivityOutcome) -> int:
    """Translate a practice attempt into an SM-2 quality score.

    Recognition is binary. Production is graded from its score because a
    correct translation says more about mastery than a flipped flashcard.
    """

    if outcome.activity_type == "recognition" or outcome.score is None:
        return 4 if outcome.was_correct else 2

    for minimum, quality in _PRODUCTION_QUALITY_STEPS:
        if outcome.score >= minimum:
            return quality
    return 1


def update_performance_data(
    previous: PerformanceData | None,
    outcome: ActivityOutcome,
) -> PerformanceData:
    base = previous.model_copy(deep=True) if previous else PerformanceData()
    counters: ActivityPerformance = getattr(base, outcome.activity_type)

    updated = ActivityPerformance(
        correct_count=counters.correct_count + (1 if outcome.was_correct else 0),
        incorrect_count=counters.incorrect_count + (0 if outcome.was_correct else 1),
        last_attempt_at=outcome.attempted_at,
    )
    setattr(base, outcome.activity_type, updated)
    return base


def update_vocab_srs(item: VocabItem, outcome: ActivityOutcome) -> SrsUpdateResult:
    quality = map_outcome_to_quality(outcome)
    review = calculate_sm2_review(
        quality=quality,
        review_date=outcome.attempted_at,
        previous=item.srs_data,
    )

    srs_data = SrsData(
        id=item.srs_data.id if item.srs_data else str(uuid.uuid4()),
        algorithm=review.algorithm,
        streak=review.streak,
        interval_hours=review.interval_hours,
        ease_factor=review.ease_factor,
        due_at=review.due_at,
        last_reviewed_at=review.last_reviewed_at,
    )

    return SrsUpdateResult(
        srs_data=srs_data,
        performance_data=update_performance_data(item.performance_data, outcome),
    )


def _accuracy(counters: ActivityPerformance) -> float | None:
    if counters.total == 0:
        return None
    return counters.correct_count / counters.total


def calculate_mastery_level(item: VocabItem) -> float | None:
    """Weighted accuracy in [0, 1], or ``None`` when nothing was attempted.

    When only one activity has attempts its accuracy is used on its own.
    """

    perf = item.performance_data
    if perf is None:
        return None

    recognition = _accuracy(perf.recognition)
    production = _accuracy(perf.production)

    if recognition is None and production is None:
        return None
    if recognition is None:
        return production
    if production is None:
        return recognition
    return recognition * RECOGNITION_WEIGHT + production * PRODUCTION_WEIGHT


def is_item_mastered(item: VocabItem) -> bool:
    mastery = calculate_mastery_level(item)
    if mastery is None or mastery < MASTERY_THRESHOLD:
        return False

    perf = item.performance_data
    total_correct = perf.recognition.correct_count + perf.production.correct_count
    if total_correct < MASTERY_MIN_CORRECT:
        return False

    streak = item.srs_data.streak if item.srs_data else 0
    return streak >= MASTERY_MIN_STREAK


def get_days_until_due(item: VocabItem, now: datetime | None = None) -> float | None:
    """Days until the next review, one decimal, negative when overdue."""

    if item.srs_data is None:
        return None
    now = as_utc(now) if now else utcnow()
    delta = as_utc(item.srs_data.due_at) - now
    days = delta.total_seconds() / 86400
    # Halves round up, so -2.25 becomes -2.2 and 0.25 becomes 0.3
    return math.floor(days * 10 + 0.5) / 10


def is_item_due(item: VocabItem, now: datetime | None = None) -> bool:
    if item.srs_data is None:
        return False
    now = as_utc(now) if now else utcnow()
    return now >= as_utc(item.srs_data.due_at)


def _summarise_activity(counters: ActivityPerformance | None) -> ActivitySummary:
    if counters is None:
        return ActivitySummary()
    return ActivitySummary(
        correct=counters.correct_count,
        incorrect=counters.incorrect_count,
        total=counters.total,
        accuracy=_accuracy(counters),
    )


def get_performance_summary(item: VocabItem, now: datetime | None = None) -> PerformanceSummary:
    perf = item.performance_data
    return PerformanceSummary(
        recognition=_summarise_activity(perf.recognition if perf else None),
        production=_summarise_activity(perf.production if perf else None),
        overall=OverallSummary(
            mastery=calculate_mastery_level(item),
            is_mastered=is_item_mastered(item),
            streak=item.srs_data.streak if item.srs_data else 0,
            days_until_due=get_days_until_due(item, now),
            is_due=is_item_due(item, now),
        ),
    )


class SRSService:
    """Database-backed entry point combining the bank with SRS scheduling."""

    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def register_outcome(self, item_id: str, outcome: ActivityOutcome) -> SrsUpdateResult:
        """Reschedule *item_id* after a practice attempt and persist the result."""

        item = vocabulary_crud.get_vocab_item(self.db, item_id)
        if item is None:
            raise ValueError("Vocabulary item not found")

        result = update_vocab_srs(item, outcome)
        item.srs_data = result.srs_data
        item.performance_data = result.performance_data
        item.updated_at = utcnow()
        vocabulary_crud.save_vocab_item(self.db, item)

        logger.info(
            "Review registered for %s (%s, correct=%s): streak=%s, next due %s",
            item_id,
            outcome.activity_type,
            outcome.was_correct,
            result.srs_data.streak,
            result.srs_data.due_at.isoformat(),
        )
        return result

    # ------------------------------------------------------------------
    # Queue
    # ------------------------------------------------------------------
    def build_drill_queue(
        self,
        *,
        now: datetime | None = None,
        limit: int | None = None,
        upcoming_window_hours: float | None = None,
    ) -> DrillSelection:
        items = vocabulary_crud.list_vocab_items(self.db)
        return select_drill_queue(
            items,
            now=now or utcnow(),
            limit=settings.DRILL_DEFAULT_LIMIT if limit is None else limit,
            upcoming_window_hours=upcoming_window_hours,
        )

    def build_review_selection(
        self,
        *,
        review_mode: ReviewMode,
        question_count: int,
        rng: random.Random | None = None,
    ) -> ReviewSelection:
        items = vocabulary_crud.list_vocab_items(self.db)
        return build_review_selection(
            items,
            review_mode=review_mode,
            question_count=question_count,
            rng=rng,
        )


__all__ = [
    "SRSService",
    "calculate_mastery_level",
    "get_days_until_due",
    "get_performance_summary",
    "is_item_due",
    "is_item_mastered",
    "map_outcome_to_quality",
    "update_performance_data",
    "update_vocab_srs",
]
