"""Fixed-size practice sessions picked from the bank by review mode."""

from __future__ import annotations

import logging
import random
from typing import List, Sequence

from lexdrill.schemas.drill_schema import ReviewMode, ReviewSelection
from lexdrill.schemas.vocabulary_schema import VocabItem
from lexdrill.utils.time_utils import as_utc

logger = logging.getLogger(__name__)


def _is_unreviewed(item: VocabItem) -> bool:
    return item.srs_data is None or item.srs_data.last_reviewed_at is None


def _ensure_latest_unreviewed(items: List[VocabItem], bank: Sequence[VocabItem]) -> List[VocabItem]:
    """Put the most recently added unreviewed word into *items*.

    Picks list unreviewed words first, so it takes the slot of the first
    unreviewed pick.
    """

    candidates = [item for item in bank if _is_unreviewed(item)]
    if not candidates:
        return items
    latest = max(candidates, key=lambda item: as_utc(item.created_at))

    if any(item.id == latest.id for item in items):
        return items

    picked = list(items)
    index = next(i for i, item in enumerate(picked) if _is_unreviewed(item))
    picked[index] = latest
    return picked


def build_review_selection(
    bank: Sequence[VocabItem],
    *,
    review_mode: ReviewMode,
    question_count: int,
    rng: random.Random | None = None,
) -> ReviewSelection:
    """Pick up to *question_count* items for a session in *review_mode*.

    ``review_only`` draws from the whole bank and reports ``insufficient``
    when the bank is smaller than the session. ``mixed`` draws from the whole
    bank and ``new_only`` from never-reviewed items; both return what the bank
    can supply. Never-reviewed items come before reviewed ones, each group in
    random order.
    """

    if question_count < 1:
        raise ValueError("question_count must be at least 1")

    rng = rng or random.Random()
    shuffled = list(bank)
    rng.shuffle(shuffled)
    unseen = [item for item in shuffled if _is_unreviewed(item)]
    seen = [item for item in shuffled if not _is_unreviewed(item)]
    ordered = unseen + seen

    if review_mode == "review_only":
        if not bank:
            return ReviewSelection(
                status="empty",
                review_mode=review_mode,
                message="No saved vocabulary yet. Add words to your bank or switch to new vocabulary.",
            )
        if len(ordered) < question_count:
            return ReviewSelection(
                status="insufficient",
                review_mode=review_mode,
                message=(
                    f"Only {len(ordered)} saved items available. "
                    "Reduce question count or add more words."
                ),
            )
        return ReviewSelection(status="ok", review_mode=review_mode, items=ordered[:question_count])

    source = ordered if review_mode == "mixed" else unseen
    picked = source[:question_count]
    if not picked:
        return ReviewSelection(
            status="empty",
            review_mode=review_mode,
            message="No vocabulary available for this mode. Add words to your bank.",
        )

    picked = _ensure_latest_unreviewed(picked, bank)
    logger.debug(
        "Review selection (%s): %s of %s requested items",
        review_mode,
        len(picked),
        question_count,
    )
    return ReviewSelection(status="ok", review_mode=review_mode, items=picked)


__all__ = ["build_review_selection"]
