import logging
from sqlalchemy import select, desc
from sqlalchemy.orm import Session

from app.notices.models import Notice
from app.notices.schemas import NoticeCreate, NoticeUpdate
from app.shared.auth import Caller, require_admin
from app.shared.db import commit
from app.shared.errors import NotFound
from app.shared.validators import require_text

logger = logging.getLogger(__name__)

def list_notices(db: Session, limit: int | None = None) -> list[Notice]:
    stmt = select(Notice).order_by(desc(Notice.created_at), desc(Notice.id))
    if limit:
        stmt = stmt.limit(limit)
    return list(db.scalars(stmt).all())

def get_notice(db: Session, notice_id: int) -> Notice:
    notice = db.get(Notice, notice_id)
    if not notice:
        raise NotFound("notice not found")
    return notice

def create_notice(db: Session, caller: Caller, payload: NoticeCreate) -> Notice:
    require_admin(caller, "writing notices")
    title = require_text(payload.title, "title")
    content = require_text(payload.content, "content")
    notice = Notice(title=title, content=content, is_important=payload.is_important, user_id=caller.user_id)
    db.add(notice)
    commit(db, "create notice")
    db.refresh(notice)
    return notice

def update_notice(db: Session, caller: Caller, notice_id: int, payload: NoticeUpdate) -> Notice:
    require_admin(caller, "editing notices")
    notice = get_notice(db, notice_id)
    title = require_text(payload.title, "title") if payload.title is not None else notice.title
    content = require_text(payload.content, "content") if payload.content is not None else notice.content
    notice.title, notice.content = title, content
    if payload.is_important is not None:
        notice.is_important = payload.is_important
    commit(db, "update notice")
    db.refresh(notice)
    return notice

def delete_notice(db: Session, caller: Caller, notice_id: int):
    require_admin(caller, "deleting notices")
    notice = get_notice(db, notice_id)
    db.delete(notice)
    commit(db, "delete notice")
    logger.info("notice %s deleted by %s", notice_id, caller.user_id)
