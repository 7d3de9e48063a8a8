"""Progress endpoints for the local learner."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from lexdrill.api.v2.dependencies import get_db
from lexdrill.core.config import settings
from lexdrill.crud import drill_session_crud, vocabulary_crud
from lexdrill.schemas.progress_schema import PerformanceSummary, ProgressStats
from lexdrill.services.progress_service import calculate_progress_stats
from lexdrill.services.srs_service import get_performance_summary
from lexdrill.utils.time_utils import utcnow

router = APIRouter()


@router.get("/stats", response_model=ProgressStats, summary="Learner progress overview")
def get_progress_stats(
    now: datetime | None = Query(default=None),
    db: Session = Depends(get_db),
):
    return calculate_progress_stats(
        user_id=settings.LEARNER_ID,
        vocab_items=vocabulary_crud.list_vocab_items(db),
        sessions=drill_session_crud.list_sessions(db),
        now=now or utcnow(),
    )


@router.get("/vocabulary/{item_id}/summary", response_model=PerformanceSummary)
def get_vocabulary_summary(
    item_id: str,
    now: datetime | None = Query(default=None),
    db: Session = Depends(get_db),
):
    item = vocabulary_crud.get_vocab_item(db, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="vocab_item_not_found")
    return get_performance_summary(item, now)
