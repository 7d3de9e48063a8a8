"""Drill queue, review registration and session history endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from lexdrill.api.v2.dependencies import get_db
from lexdrill.crud import drill_session_crud
from lexdrill.schemas.drill_schema import (
    ActivityOutcome,
    DrillSelection,
    DrillSession,
    ReviewMode,
    ReviewSelection,
    SrsUpdateResult,
)
from lexdrill.services.srs_service import SRSService

router = APIRouter()


@router.get("/queue", response_model=DrillSelection, summary="Next practice queue")
def get_drill_queue(
    limit: int | None = Query(default=None, le=500),
    upcoming_window_hours: float | None = Query(default=None, ge=0, le=24 * 30),
    now: datetime | None = Query(default=None, description="Reference time, defaults to the server clock"),
    db: Session = Depends(get_db),
):
    """Due items, then items due within the window, then never-reviewed items.

    Counts report every item in each bucket even when ``limit`` cuts the queue.
    """

    return SRSService(db).build_drill_queue(
        now=now,
        limit=limit,
        upcoming_window_hours=upcoming_window_hours,
    )


@router.get("/selection", response_model=ReviewSelection, summary="Session items by review mode")
def get_review_selection(
    review_mode: ReviewMode = Query(default="mixed"),
    question_count: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    return SRSService(db).build_review_selection(
        review_mode=review_mode,
        question_count=question_count,
    )


@router.post("/reviews/{item_id}", response_model=SrsUpdateResult)
def register_review(
    item_id: str,
    outcome: ActivityOutcome,
    db: Session = Depends(get_db),
):
    try:
        return SRSService(db).register_outcome(item_id, outcome)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail="vocab_item_not_found") from exc


@router.post("/sessions", response_model=DrillSession, status_code=status.HTTP_201_CREATED)
def record_drill_session(session: DrillSession, db: Session = Depends(get_db)):
    try:
        return drill_session_crud.record_session(db, session)
    except ValueError as exc:
        raise HTTPException(status_code=409, detail="drill_session_exists") from exc


@router.get("/sessions", response_model=list[DrillSession])
def list_drill_sessions(db: Session = Depends(get_db)):
    return drill_session_crud.list_sessions(db)
