from __future__ import annotations

import logging

from sqlalchemy.orm import Session, selectinload

from lexdrill.models.srs_record_model import SrsRecord
from lexdrill.models.vocabulary_item_model import VocabularyItem
from lexdrill.schemas.vocabulary_schema import PerformanceData, SrsData, VocabItem
from lexdrill.utils.time_utils import as_utc, as_utc_optional, utcnow

logger = logging.getLogger(__name__)


def _to_schema(row: VocabularyItem) -> VocabItem:
    srs = row.srs_record
    return VocabItem(
        id=row.id,
        term=row.term,
        reading=row.reading,
        meaning=row.meaning,
        examples=list(row.examples or []),
        tags=list(row.tags or []),
        folders=list(row.folders or []),
        level=row.level,
        created_at=row.created_at,
        updated_at=row.updated_at,
        srs_data=SrsData.model_validate(srs) if srs is not None else None,
        performance_data=(
            PerformanceData.model_validate(row.performance_data)
            if row.performance_data
            else None
        ),
    )


def _ensure_srs_id_available(db: Session, item_id: str, data: SrsData | None) -> None:
    if data is None:
        return
    owner = db.get(SrsRecord, data.id)
    if owner is not None and owner.vocab_item_id != item_id:
        raise ValueError(f"SRS record {data.id} already belongs to another item")


def _apply_srs(row: VocabularyItem, data: SrsData | None) -> None:
    if data is None:
        row.srs_record = None
        return

    record = row.srs_record
    if record is None:
        record = SrsRecord(id=data.id, vocab_item_id=row.id)
        row.srs_record = record

    record.algorithm = data.algorithm
    record.streak = data.streak
    record.interval_hours = data.interval_hours
    record.ease_factor = data.ease_factor
    record.due_at = as_utc(data.due_at)
    record.last_reviewed_at = as_utc_optional(data.last_reviewed_at)


def _dump_performance(data: PerformanceData | None) -> dict | None:
    if data is None:
        return None
    return data.model_dump(mode="json")


def _get_row(db: Session, item_id: str) -> VocabularyItem | None:
    return (
        db.query(VocabularyItem)
        .options(selectinload(VocabularyItem.srs_record))
        .filter(VocabularyItem.id == item_id)
        .first()
    )


def get_vocab_item(db: Session, item_id: str) -> VocabItem | None:
    row = _get_row(db, item_id)
    return _to_schema(row) if row else None


def list_vocab_items(db: Session) -> list[VocabItem]:
    rows = (
        db.query(VocabularyItem)
        .options(selectinload(VocabularyItem.srs_record))
        .order_by(VocabularyItem.created_at.asc(), VocabularyItem.id.asc())
        .all()
    )
    return [_to_schema(row) for row in rows]


def list_vocab_items_by_tag(db: Session, tag: str) -> list[VocabItem]:
    # Tags live in a JSON column; filtering in Python keeps SQLite and Postgres alike
    return [item for item in list_vocab_items(db) if tag in item.tags]


def save_vocab_item(db: Session, item: VocabItem) -> VocabItem:
    """Insert *item* or overwrite the stored copy with the same id."""

    _ensure_srs_id_available(db, item.id, item.srs_data)
    row = _get_row(db, item.id)
    if row is None:
        row = VocabularyItem(id=item.id)
        db.add(row)

    row.term = item.term.strip()
    row.reading = item.reading
    row.meaning = item.meaning
    row.examples = list(item.examples)
    row.tags = list(item.tags)
    row.folders = list(item.folders)
    row.level = item.level
    row.created_at = as_utc(item.created_at)
    row.updated_at = as_utc(item.updated_at)
    row.performance_data = _dump_performance(item.performance_data)
    _apply_srs(row, item.srs_data)

    db.commit()
    db.refresh(row)
    return _to_schema(row)


def delete_vocab_item(db: Session, item_id: str) -> bool:
    row = _get_row(db, item_id)
    if row is None:
        return False
    db.delete(row)
    db.commit()
    logger.info("Deleted vocabulary item %s", item_id)
    return True


def update_srs_data(db: Session, item_id: str, data: SrsData) -> VocabItem:
    row = _get_row(db, item_id)
    if row is None:
        raise ValueError("Vocabulary item not found")
    _ensure_srs_id_available(db, item_id, data)

    _apply_srs(row, data)
    row.updated_at = utcnow()
    db.commit()
    db.refresh(row)
    return _to_schema(row)


def update_performance_data(db: Session, item_id: str, data: PerformanceData) -> VocabItem:
    row = _get_row(db, item_id)
    if row is None:
        raise ValueError("Vocabulary item not found")

    row.performance_data = _dump_performance(data)
    row.updated_at = utcnow()
    db.commit()
    db.refresh(row)
    return _to_schema(row)
