# lexdrill/api/v2/endpoints/vocabulary_router.py

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from lexdrill.api.v2.dependencies import get_db
from lexdrill.crud import vocabulary_crud
from lexdrill.schemas.vocabulary_schema import VocabItem

router = APIRouter()


@router.get("/", response_model=list[VocabItem], summary="List the vocabulary bank")
def list_vocabulary(
    tag: str | None = Query(default=None, min_length=1),
    db: Session = Depends(get_db),
):
    if tag:
        return vocabulary_crud.list_vocab_items_by_tag(db, tag)
    return vocabulary_crud.list_vocab_items(db)


@router.get("/{item_id}", response_model=VocabItem)
def get_vocabulary_item(item_id: str, db: Session = Depends(get_db)):
    item = vocabulary_crud.get_vocab_item(db, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="vocab_item_not_found")
    return item


@router.post("/", response_model=VocabItem, status_code=status.HTTP_201_CREATED)
def create_vocabulary_item(item: VocabItem, db: Session = Depends(get_db)):
    if vocabulary_crud.get_vocab_item(db, item.id) is not None:
        raise HTTPException(status_code=409, detail="vocab_item_exists")
    try:
        return vocabulary_crud.save_vocab_item(db, item)
    except ValueError as exc:
        raise HTTPException(status_code=409, detail="srs_record_conflict") from exc


@router.put("/{item_id}", response_model=VocabItem)
def update_vocabulary_item(item_id: str, item: VocabItem, db: Session = Depends(get_db)):
    """Replace the stored item, scheduling state included."""
    if item.id != item_id:
        raise HTTPException(status_code=400, detail="vocab_item_id_mismatch")
    stored = vocabulary_crud.get_vocab_item(db, item_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="vocab_item_not_found")
    if "created_at" not in item.model_fields_set:
        # Creation time orders never-reviewed items in the drill queue
        item = item.model_copy(update={"created_at": stored.created_at})
    try:
        return vocabulary_crud.save_vocab_item(db, item)
    except ValueError as exc:
        raise HTTPException(status_code=409, detail="srs_record_conflict") from exc


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vocabulary_item(item_id: str, db: Session = Depends(get_db)):
    if not vocabulary_crud.delete_vocab_item(db, item_id):
        raise HTTPException(status_code=404, detail="vocab_item_not_found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
