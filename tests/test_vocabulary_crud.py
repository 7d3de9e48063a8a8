from __future__ import annotations

import pytest

from lexdrill.crud import drill_session_crud, vocabulary_crud
from lexdrill.models.srs_record_model import SrsRecord
from lexdrill.schemas.vocabulary_schema import ActivityPerformance, PerformanceData
from tests.utils import create_vocab, make_session, make_srs, make_vocab, ts


def test_save_and_get_round_trip(db_session):
    item = make_vocab(
        id="neko",
        term="  猫 ",
        reading="ねこ",
        meaning="cat",
        examples=["猫が好きです。"],
        tags=["animals"],
        folders=["jlpt-n5"],
        srs_data=make_srs("2025-01-10T10:00:00Z", id="srs-neko", streak=2, last_reviewed_at="2025-01-05T10:00:00Z"),
    )

    saved = vocabulary_crud.save_vocab_item(db_session, item)
    fetched = vocabulary_crud.get_vocab_item(db_session, "neko")

    assert saved == fetched
    assert fetched.term == "猫"
    assert fetched.tags == ["animals"]
    assert fetched.srs_data.id == "srs-neko"
    assert fetched.srs_data.due_at == ts("2025-01-10T10:00:00Z")
    assert fetched.srs_data.last_reviewed_at == ts("2025-01-05T10:00:00Z")
    assert fetched.created_at == ts("2025-01-01T00:00:00Z")


def test_get_unknown_item_returns_none(db_session):
    assert vocabulary_crud.get_vocab_item(db_session, "missing") is None


def test_list_and_filter_by_tag(db_session):
    create_vocab(db_session, id="b", tags=["food"], created_at="2025-01-02T00:00:00Z")
    create_vocab(db_session, id="a", tags=["food", "verbs"], created_at="2025-01-01T00:00:00Z")
    create_vocab(db_session, id="c", tags=["verbs"], created_at="2025-01-03T00:00:00Z")

    assert [item.id for item in vocabulary_crud.list_vocab_items(db_session)] == ["a", "b", "c"]
    assert [item.id for item in vocabulary_crud.list_vocab_items_by_tag(db_session, "food")] == ["a", "b"]
    assert vocabulary_crud.list_vocab_items_by_tag(db_session, "unknown") == []


def test_save_overwrites_and_clears_schedule(db_session):
    create_vocab(db_session, id="word", srs_data=make_srs("2025-01-10T10:00:00Z"))

    item = vocabulary_crud.get_vocab_item(db_session, "word")
    item.meaning = "updated"
    item.srs_data = None
    vocabulary_crud.save_vocab_item(db_session, item)

    fetched = vocabulary_crud.get_vocab_item(db_session, "word")
    assert fetched.meaning == "updated"
    assert fetched.srs_data is None
    assert db_session.query(SrsRecord).count() == 0


def test_update_srs_and_performance(db_session):
    create_vocab(db_session, id="word")

    updated = vocabulary_crud.update_srs_data(db_session, "word", make_srs("2025-01-12T00:00:00Z", streak=4))
    assert updated.srs_data.streak == 4

    performance = PerformanceData(
        recognition=ActivityPerformance(correct_count=2, incorrect_count=1, last_attempt_at="2025-01-10T12:00:00Z")
    )
    updated = vocabulary_crud.update_performance_data(db_session, "word", performance)
    assert updated.performance_data.recognition.correct_count == 2
    assert updated.performance_data.recognition.last_attempt_at == ts("2025-01-10T12:00:00Z")
    assert updated.srs_data.streak == 4


def test_updates_reject_unknown_items(db_session):
    with pytest.raises(ValueError):
        vocabulary_crud.update_srs_data(db_session, "missing", make_srs("2025-01-12T00:00:00Z"))
    with pytest.raises(ValueError):
        vocabulary_crud.update_performance_data(db_session, "missing", PerformanceData())


def test_srs_record_ids_are_not_shared_between_items(db_session):
    create_vocab(db_session, id="owner", srs_data=make_srs("2025-01-10T00:00:00Z", id="srs-x"))
    create_vocab(db_session, id="other")

    with pytest.raises(ValueError):
        vocabulary_crud.save_vocab_item(
            db_session, make_vocab(id="intruder", srs_data=make_srs("2025-01-10T00:00:00Z", id="srs-x"))
        )
    with pytest.raises(ValueError):
        vocabulary_crud.update_srs_data(db_session, "other", make_srs("2025-01-10T00:00:00Z", id="srs-x"))

    assert vocabulary_crud.get_vocab_item(db_session, "intruder") is None
    assert db_session.query(SrsRecord).count() == 1

    # Re-saving the owner with its own record id is fine
    again = vocabulary_crud.save_vocab_item(
        db_session, make_vocab(id="owner", srs_data=make_srs("2025-01-12T00:00:00Z", id="srs-x"))
    )
    assert again.srs_data.due_at == ts("2025-01-12T00:00:00Z")


def test_delete_cascades_schedule(db_session):
    create_vocab(db_session, id="word", srs_data=make_srs("2025-01-10T10:00:00Z"))

    assert vocabulary_crud.delete_vocab_item(db_session, "word") is True
    assert vocabulary_crud.get_vocab_item(db_session, "word") is None
    assert db_session.query(SrsRecord).count() == 0
    assert vocabulary_crud.delete_vocab_item(db_session, "word") is False


def test_drill_sessions_are_listed_most_recent_first(db_session):
    older = drill_session_crud.record_session(db_session, make_session(id="s1", ended_at="2025-01-08T10:00:00Z"))
    newer = drill_session_crud.record_session(
        db_session,
        make_session(id="s2", ended_at="2025-01-09T10:00:00Z", vocab_item_ids=["a", "b"], score=0.5),
    )

    sessions = drill_session_crud.list_sessions(db_session)

    assert [session.id for session in sessions] == [newer.id, older.id]
    assert sessions[0].vocab_item_ids == ["a", "b"]
    assert sessions[0].ended_at == ts("2025-01-09T10:00:00Z")

    with pytest.raises(ValueError):
        drill_session_crud.record_session(db_session, make_session(id="s1"))
