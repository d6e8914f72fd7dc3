import logging
from sqlalchemy import select, desc
from sqlalchemy.orm import Session

from app.reviews.models import Review
from app.reviews.schemas import ReviewCreate, ReviewUpdate
from app.shared.auth import Caller, require_owner, require_owner_or_admin
from app.shared.db import commit
from app.shared.errors import NotFound, ValidationError
from app.shared.validators import require_text, optional_text

logger = logging.getLogger(__name__)

MIN_RATING, MAX_RATING = 1, 5

def _fields(payload: ReviewCreate) -> dict:
    fields = {
        "title": require_text(payload.title, "title"),
        "content": require_text(payload.content, "content"),
        "rating": payload.rating,
        "region": optional_text(payload.region),
        "organization": optional_text(payload.organization),
    }
    if not (MIN_RATING <= payload.rating <= MAX_RATING):
        raise ValidationError(f"rating must be between {MIN_RATING} and {MAX_RATING}")
    return fields

def list_reviews(db: Session, limit: int | None = None, user_id: str | None = None) -> list[Review]:
    stmt = select(Review)
    if user_id:
        stmt = stmt.where(Review.user_id == user_id)
    stmt = stmt.order_by(desc(Review.created_at), desc(Review.id))
    if limit:
        stmt = stmt.limit(limit)
    return list(db.scalars(stmt).all())

def list_user_reviews(db: Session, caller: Caller, user_id: str) -> list[Review]:
    # caller only needs to be signed in
    return list_reviews(db, user_id=user_id)

def get_review(db: Session, review_id: int) -> Review:
    review = db.get(Review, review_id)
    if not review:
        raise NotFound("review not found")
    return review

def create_review(db: Session, caller: Caller, payload: ReviewCreate) -> Review:
    review = Review(user_id=caller.user_id, **_fields(payload))
    db.add(review)
    commit(db, "create review")
    db.refresh(review)
    return review

def update_review(db: Session, caller: Caller, review_id: int, payload: ReviewUpdate) -> Review:
    review = get_review(db, review_id)
    require_owner(caller, review.user_id, "editing a review")
    for key, value in _fields(payload).items():
        setattr(review, key, value)
    commit(db, "update review")
    db.refresh(review)
    return review

def delete_review(db: Session, caller: Caller, review_id: int):
    review = get_review(db, review_id)
    require_owner_or_admin(caller, review.user_id, "deleting a review")
    db.delete(review)
    commit(db, "delete review")
    logger.info("review %s deleted by %s", review_id, caller.user_id)
