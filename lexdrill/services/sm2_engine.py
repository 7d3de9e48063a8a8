"""SM-2 spaced repetition scheduling.

A review is scored from 0 (complete blackout) to 5 (perfect recall). Scores
of 3 and above count as a success and grow the interval; anything lower
resets the streak and schedules the item again after the minimum interval.
Intervals are expressed in hours.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from lexdrill.core.config import settings
from lexdrill.schemas.drill_schema import Sm2ReviewResult
from lexdrill.schemas.vocabulary_schema import SrsData
from lexdrill.utils.time_utils import as_utc

MIN_EASE_FACTOR = 1.3
INITIAL_EASE_FACTOR = 2.5
SUCCESS_THRESHOLD = 3
# Second successful review in a row waits six base intervals
SECOND_STEP_MULTIPLIER = 6


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_sm2_review(
    quality: float,
    review_date: datetime,
    previous: SrsData | Sm2ReviewResult | None = None,
    minimum_interval_hours: float | None = None,
) -> Sm2ReviewResult:
    """Apply one SM-2 step to *previous* and return the new schedule.

    ``minimum_interval_hours`` can only lengthen the configured base interval,
    never shorten it.
    """

    if not isinstance(quality, (int, float)) or not math.isfinite(quality) or quality < 0 or quality > 5:
        raise ValueError("quality must be a number between 0 and 5 inclusive")

    base_interval = settings.SRS_MIN_INTERVAL_HOURS
    minimum_interval = max(base_interval, minimum_interval_hours or base_interval)

    previous_ease = previous.ease_factor if previous else INITIAL_EASE_FACTOR
    previous_streak = previous.streak if previous else 0
    previous_interval = previous.interval_hours if previous else 0
    algorithm = previous.algorithm if previous else "sm2"

    quality_offset = 5 - quality
    ease_adjustment = 0.1 - quality_offset * (0.08 + quality_offset * 0.02)
    next_ease = max(MIN_EASE_FACTOR, previous_ease + ease_adjustment)

    was_successful = quality >= SUCCESS_THRESHOLD

    if was_successful:
        next_streak = previous_streak + 1
        if previous_streak == 0:
            next_interval = minimum_interval
        elif previous_streak == 1:
            next_interval = SECOND_STEP_MULTIPLIER * base_interval
        elif previous_interval > 0:
            next_interval = max(minimum_interval, _round_half_up(previous_interval * next_ease))
        else:
            next_interval = minimum_interval
    else:
        next_streak = 0
        next_interval = minimum_interval

    review_date = as_utc(review_date)

    return Sm2ReviewResult(
        algorithm=algorithm,
        ease_factor=round(next_ease, 4),
        interval_hours=next_interval,
        streak=next_streak,
        due_at=review_date + timedelta(hours=next_interval),
        last_reviewed_at=review_date,
        was_successful=was_successful,
    )


__all__ = ["calculate_sm2_review", "MIN_EASE_FACTOR", "INITIAL_EASE_FACTOR"]
