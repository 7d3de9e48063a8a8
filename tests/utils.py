"""Utility helpers for test factories."""

from __future__ import annotations

from datetime import datetime, timezone

from lexdrill.crud import vocabulary_crud
from lexdrill.schemas.drill_schema import DrillSession
from lexdrill.schemas.vocabulary_schema import SrsData, VocabItem

_counter = 0


def ts(value: str) -> datetime:
    """Parse an ISO-8601 UTC timestamp such as ``2025-01-10T12:00:00.000Z``."""
    return datetime.fromisoformat(value.replace("Z", "+00:00")).astimezone(timezone.utc)


def make_srs(due_at: str, **kwargs) -> SrsData:
    defaults = {
        "algorithm": "sm2",
        "streak": 1,
        "interval_hours": 24,
        "ease_factor": 2.5,
        "due_at": due_at,
        "last_reviewed_at": None,
    }
    defaults.update(kwargs)
    return SrsData(**defaults)


def make_vocab(**kwargs) -> VocabItem:
    global _counter
    _counter += 1
    defaults = {
        "id": f"vocab-{_counter}",
        "term": "term",
        "meaning": "meaning",
        "examples": [],
        "tags": [],
        "folders": [],
        "level": "A1",
        "created_at": "2025-01-01T00:00:00.000Z",
        "updated_at": "2025-01-01T00:00:00.000Z",
    }
    defaults.update(kwargs)
    return VocabItem(**defaults)


def create_vocab(db, **kwargs) -> VocabItem:
    return vocabulary_crud.save_vocab_item(db, make_vocab(**kwargs))


def make_session(**kwargs) -> DrillSession:
    global _counter
    _counter += 1
    defaults = {
        "id": f"session-{_counter}",
        "vocab_item_ids": [],
        "started_at": "2025-01-01T00:00:00.000Z",
        "ended_at": "2025-01-01T01:00:00.000Z",
        "score": 1,
        "correct_count": 0,
        "incorrect_count": 0,
    }
    defaults.update(kwargs)
    if "started_at" not in kwargs and "ended_at" in kwargs:
        defaults["started_at"] = defaults["ended_at"]
    return DrillSession(**defaults)
