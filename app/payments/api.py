from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.auth import get_caller, Caller
from app.payments.schemas import PaymentCreate, PaymentOut
from app.payments.service import create_payment, list_payments

router = APIRouter(prefix="/payments", tags=["Payments"])

@router.post("", response_model=PaymentOut, status_code=201)
def api_create(payload: PaymentCreate, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return create_payment(db, caller, payload)

@router.get("", response_model=list[PaymentOut])
def api_list(caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return list_payments(db, caller)
