from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.auth import get_caller, Caller
from app.notices.schemas import NoticeCreate, NoticeUpdate, NoticeOut
from app.notices.service import list_notices, get_notice, create_notice, update_notice, delete_notice

router = APIRouter(prefix="/notices", tags=["Notices"])

@router.get("", response_model=list[NoticeOut])
def api_list(limit: int | None = Query(None, ge=1, le=100), db: Session = Depends(get_db)):
    return list_notices(db, limit)

@router.get("/{notice_id}", response_model=NoticeOut)
def api_get(notice_id: int, db: Session = Depends(get_db)):
    return get_notice(db, notice_id)

@router.post("", response_model=NoticeOut, status_code=201)
def api_create(payload: NoticeCreate, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return create_notice(db, caller, payload)

@router.patch("/{notice_id}", response_model=NoticeOut)
def api_update(notice_id: int, payload: NoticeUpdate, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return update_notice(db, caller, notice_id, payload)

@router.delete("/{notice_id}", status_code=204)
def api_delete(notice_id: int, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    delete_notice(db, caller, notice_id)
