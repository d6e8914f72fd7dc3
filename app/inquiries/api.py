from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.auth import get_caller, Caller
from app.inquiries.schemas import InquiryCreate, InquiryUpdate, InquiryReply, InquiryOut
from app.inquiries.service import (
    list_inquiries,
    get_inquiry,
    create_inquiry,
    update_inquiry,
    reply_inquiry,
    delete_inquiry,
)

router = APIRouter(prefix="/inquiries", tags=["Inquiries"])

@router.get("", response_model=list[InquiryOut])
def api_list(caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return list_inquiries(db, caller)

@router.get("/{inquiry_id}", response_model=InquiryOut)
def api_get(inquiry_id: int, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return get_inquiry(db, caller, inquiry_id)

@router.post("", response_model=InquiryOut, status_code=201)
def api_create(payload: InquiryCreate, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return create_inquiry(db, caller, payload)

@router.patch("/{inquiry_id}", response_model=InquiryOut)
def api_update(inquiry_id: int, payload: InquiryUpdate, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return update_inquiry(db, caller, inquiry_id, payload)

@router.post("/{inquiry_id}/reply", response_model=InquiryOut)
def api_reply(inquiry_id: int, payload: InquiryReply, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return reply_inquiry(db, caller, inquiry_id, payload.reply)

@router.delete("/{inquiry_id}", status_code=204)
def api_delete(inquiry_id: int, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    delete_inquiry(db, caller, inquiry_id)
