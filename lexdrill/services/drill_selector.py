"""Drill queue selection: due items first, then upcoming, then new ones."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterable, List

from lexdrill.core.config import settings
from lexdrill.schemas.drill_schema import DrillSelection
from lexdrill.schemas.vocabulary_schema import VocabItem
from lexdrill.utils.time_utils import as_utc

logger = logging.getLogger(__name__)


def _due_key(item: VocabItem) -> datetime:
    return as_utc(item.srs_data.due_at)


def _created_key(item: VocabItem) -> datetime:
    return as_utc(item.created_at)


def select_drill_queue(
    items: Iterable[VocabItem],
    *,
    now: datetime,
    limit: int | None = None,
    upcoming_window_hours: float | None = None,
) -> DrillSelection:
    """Build the practice queue for *items* relative to *now*.

    Each scheduled item is due (``due_at <= now``), upcoming (due within the
    window) or later; unscheduled items are new. Later items are left out of
    both the queue and the counts. Due and upcoming items are ordered by
    ``due_at``, new items by ``created_at``; ties keep the input order.

    Counts describe the whole pool, not the truncated queue. A ``limit`` of
    zero or less yields an empty queue, ``None`` means unbounded.
    """

    if upcoming_window_hours is None:
        upcoming_window_hours = settings.DRILL_UPCOMING_WINDOW_HOURS

    now = as_utc(now)
    horizon = now + timedelta(hours=upcoming_window_hours)

    due: List[VocabItem] = []
    upcoming: List[VocabItem] = []
    new_items: List[VocabItem] = []
    later_count = 0

    for item in items:
        if item.srs_data is None:
            new_items.append(item)
            continue

        due_at = _due_key(item)
        if due_at <= now:
            due.append(item)
        elif due_at <= horizon:
            upcoming.append(item)
        else:
            later_count += 1

    # list.sort is stable, so equal keys keep their input order
    due.sort(key=_due_key)
    upcoming.sort(key=_due_key)
    new_items.sort(key=_created_key)

    if limit is not None and limit <= 0:
        queue: List[VocabItem] = []
    else:
        queue = [*due, *upcoming, *new_items]
        if limit is not None:
            queue = queue[:limit]

    logger.debug(
        "Drill queue: %s items (due=%s, upcoming=%s, new=%s, later=%s)",
        len(queue),
        len(due),
        len(upcoming),
        len(new_items),
        later_count,
    )

    return DrillSelection(
        queue=queue,
        due_count=len(due),
        upcoming_count=len(upcoming),
        new_count=len(new_items),
    )


__all__ = ["select_drill_queue"]
