"""
Support inquiries.

Visibility is enforced here, not in the router: a non-admin caller only
ever sees their own inquiries, whichever function they go through.
"""
import logging
from datetime import datetime, timezone
from sqlalchemy import select, desc
from sqlalchemy.orm import Session

from app.inquiries.models import Inquiry, STATUS_PENDING, STATUS_ANSWERED
from app.inquiries.schemas import InquiryCreate, InquiryUpdate
from app.shared.auth import Caller, require_admin, require_owner
from app.shared.db import commit
from app.shared.errors import NotFound
from app.shared.validators import require_text

logger = logging.getLogger(__name__)

def _visible(stmt, caller: Caller):
    if caller.is_admin:
        return stmt
    return stmt.where(Inquiry.user_id == caller.user_id)

def list_inquiries(db: Session, caller: Caller) -> list[Inquiry]:
    stmt = _visible(select(Inquiry), caller).order_by(desc(Inquiry.created_at), desc(Inquiry.id))
    return list(db.scalars(stmt).all())

def get_inquiry(db: Session, caller: Caller, inquiry_id: int) -> Inquiry:
    stmt = _visible(select(Inquiry).where(Inquiry.id == inquiry_id), caller)
    inquiry = db.scalars(stmt).first()
    if not inquiry:
        raise NotFound("inquiry not found")
    return inquiry

def create_inquiry(db: Session, caller: Caller, payload: InquiryCreate) -> Inquiry:
    title = require_text(payload.title, "title")
    content = require_text(payload.content, "content")
    inquiry = Inquiry(title=title, content=content, user_id=caller.user_id, status=STATUS_PENDING)
    db.add(inquiry)
    commit(db, "create inquiry")
    db.refresh(inquiry)
    return inquiry

def update_inquiry(db: Session, caller: Caller, inquiry_id: int, payload: InquiryUpdate) -> Inquiry:
    # unfiltered lookup: a stranger gets 403, not 404
    inquiry = db.get(Inquiry, inquiry_id)
    if not inquiry:
        raise NotFound("inquiry not found")
    require_owner(caller, inquiry.user_id, "editing an inquiry")
    title = require_text(payload.title, "title") if payload.title is not None else inquiry.title
    content = require_text(payload.content, "content") if payload.content is not None else inquiry.content
    inquiry.title, inquiry.content = title, content
    commit(db, "update inquiry")
    db.refresh(inquiry)
    return inquiry

def reply_inquiry(db: Session, caller: Caller, inquiry_id: int, text: str) -> Inquiry:
    require_admin(caller, "replying to inquiries")
    reply = require_text(text, "reply")
    inquiry = get_inquiry(db, caller, inquiry_id)
    inquiry.reply = reply
    inquiry.reply_date = datetime.now(timezone.utc)
    inquiry.status = STATUS_ANSWERED
    commit(db, "reply to inquiry")
    db.refresh(inquiry)
    logger.info("inquiry %s answered by %s", inquiry_id, caller.user_id)
    return inquiry

def delete_inquiry(db: Session, caller: Caller, inquiry_id: int):
    require_admin(caller, "deleting inquiries")
    inquiry = get_inquiry(db, caller, inquiry_id)
    db.delete(inquiry)
    commit(db, "delete inquiry")
    logger.info("inquiry %s deleted by %s", inquiry_id, caller.user_id)
