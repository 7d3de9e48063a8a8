from __future__ import annotations

from sqlalchemy.orm import Session

from lexdrill.models.drill_session_model import DrillSessionRecord
from lexdrill.schemas.drill_schema import DrillSession


def record_session(db: Session, session: DrillSession) -> DrillSession:
    if db.get(DrillSessionRecord, session.id) is not None:
        raise ValueError("Drill session already recorded")

    row = DrillSessionRecord(
        id=session.id,
        vocab_item_ids=list(session.vocab_item_ids),
        started_at=session.started_at,
        ended_at=session.ended_at,
        score=session.score,
        correct_count=session.correct_count,
        incorrect_count=session.incorrect_count,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return DrillSession.model_validate(row)


def list_sessions(db: Session) -> list[DrillSession]:
    rows = (
        db.query(DrillSessionRecord)
        .order_by(DrillSessionRecord.ended_at.desc())
        .all()
    )
    return [DrillSession.model_validate(row) for row in rows]
