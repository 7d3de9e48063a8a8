"""Aggregate learner progress derived from the bank and drill history."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

from lexdrill.core.config import settings
from lexdrill.schemas.drill_schema import DrillSession
from lexdrill.schemas.progress_schema import ProgressStats
from lexdrill.schemas.vocabulary_schema import VocabItem
from lexdrill.utils.time_utils import as_utc


def calculate_progress_stats(
    user_id: str,
    vocab_items: Sequence[VocabItem],
    sessions: Iterable[DrillSession],
    now: datetime,
    learned_streak_threshold: int | None = None,
) -> ProgressStats:
    """Count learned and due items and the current daily study streak."""

    if learned_streak_threshold is None:
        learned_streak_threshold = settings.LEARNED_STREAK_THRESHOLD

    now = as_utc(now)
    learned = 0
    due = 0

    for item in vocab_items:
        srs = item.srs_data
        if srs is None:
            continue
        if srs.streak >= learned_streak_threshold:
            learned += 1
        if as_utc(srs.due_at) <= now:
            due += 1

    end_dates = sorted((as_utc(session.ended_at) for session in sessions), reverse=True)

    return ProgressStats(
        user_id=user_id,
        total_vocab_count=len(vocab_items),
        learned_vocab_count=learned,
        review_due_count=due,
        streak_days=_calculate_streak_days(end_dates, now),
        last_session_at=end_dates[0] if end_dates else None,
    )


def _calculate_streak_days(session_ends: Sequence[datetime], now: datetime) -> int:
    """Consecutive UTC days with a session, counting back from today."""

    study_days: set[date] = {ended.date() for ended in session_ends}
    streak = 0
    cursor = now.date()
    while cursor in study_days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


__all__ = ["calculate_progress_stats"]
