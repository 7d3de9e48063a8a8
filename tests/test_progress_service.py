from lexdrill.services.progress_service import calculate_progress_stats
from tests.utils import make_session, make_srs, make_vocab, ts

NOW = ts("2025-01-10T12:00:00.000Z")


def test_derives_counts_streak_and_last_session():
    vocab_items = [
        make_vocab(
            id="learned-due",
            srs_data=make_srs("2025-01-09T23:00:00.000Z", streak=3, interval_hours=72, ease_factor=2.4),
        ),
        make_vocab(
            id="learning",
            srs_data=make_srs("2025-01-12T12:00:00.000Z", streak=2, interval_hours=120),
        ),
        make_vocab(id="newbie"),
    ]
    sessions = [
        make_session(ended_at="2025-01-10T09:00:00.000Z"),
        make_session(ended_at="2025-01-09T09:00:00.000Z"),
        make_session(ended_at="2025-01-07T09:00:00.000Z"),
    ]

    stats = calculate_progress_stats(
        user_id="user-1",
        vocab_items=vocab_items,
        sessions=sessions,
        now=NOW,
        learned_streak_threshold=3,
    )

    assert stats.model_dump() == {
        "user_id": "user-1",
        "total_vocab_count": 3,
        "learned_vocab_count": 1,
        "review_due_count": 1,
        "streak_days": 2,
        "last_session_at": ts("2025-01-10T09:00:00.000Z"),
    }


def test_handles_empty_input():
    stats = calculate_progress_stats(user_id="user-42", vocab_items=[], sessions=[], now=NOW)

    assert stats.model_dump() == {
        "user_id": "user-42",
        "total_vocab_count": 0,
        "learned_vocab_count": 0,
        "review_due_count": 0,
        "streak_days": 0,
        "last_session_at": None,
    }


def test_streak_is_zero_without_a_session_today():
    sessions = [
        make_session(ended_at="2025-01-09T22:00:00.000Z"),
        make_session(ended_at="2025-01-08T22:00:00.000Z"),
    ]

    stats = calculate_progress_stats(user_id="u", vocab_items=[], sessions=sessions, now=NOW)

    assert stats.streak_days == 0
    assert stats.last_session_at == ts("2025-01-09T22:00:00.000Z")


def test_several_sessions_on_one_day_count_once():
    sessions = [
        make_session(ended_at="2025-01-10T08:00:00.000Z"),
        make_session(ended_at="2025-01-10T10:00:00.000Z"),
        make_session(ended_at="2025-01-09T10:00:00.000Z"),
        make_session(ended_at="2025-01-08T10:00:00.000Z"),
    ]

    stats = calculate_progress_stats(user_id="u", vocab_items=[], sessions=sessions, now=NOW)

    assert stats.streak_days == 3


def test_learned_threshold_defaults_to_settings(monkeypatch):
    from lexdrill.core.config import settings

    monkeypatch.setattr(settings, "LEARNED_STREAK_THRESHOLD", 2)
    items = [make_vocab(srs_data=make_srs("2025-02-01T00:00:00.000Z", streak=2))]

    stats = calculate_progress_stats(user_id="u", vocab_items=items, sessions=[], now=NOW)

    assert stats.learned_vocab_count == 1
    assert stats.review_due_count == 0
