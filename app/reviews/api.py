from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.auth import get_caller, Caller
from app.reviews.schemas import ReviewCreate, ReviewUpdate, ReviewOut
from app.reviews.service import (
    list_reviews,
    list_user_reviews,
    get_review,
    create_review,
    update_review,
    delete_review,
)

router = APIRouter(prefix="/reviews", tags=["Reviews"])

@router.get("", response_model=list[ReviewOut])
def api_list(limit: int | None = Query(None, ge=1, le=100), db: Session = Depends(get_db)):
    return list_reviews(db, limit)

@router.get("/users/{user_id}", response_model=list[ReviewOut])
def api_list_for_user(user_id: str, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return list_user_reviews(db, caller, user_id)

@router.get("/{review_id}", response_model=ReviewOut)
def api_get(review_id: int, db: Session = Depends(get_db)):
    return get_review(db, review_id)

@router.post("", response_model=ReviewOut, status_code=201)
def api_create(payload: ReviewCreate, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return create_review(db, caller, payload)

@router.put("/{review_id}", response_model=ReviewOut)
def api_update(review_id: int, payload: ReviewUpdate, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return update_review(db, caller, review_id, payload)

@router.delete("/{review_id}", status_code=204)
def api_delete(review_id: int, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    delete_review(db, caller, review_id)
