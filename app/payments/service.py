import logging
from sqlalchemy import select, desc
from sqlalchemy.orm import Session

from app.payments.models import Payment
from app.payments.schemas import PaymentCreate
from app.shared.auth import Caller
from app.shared.db import commit

logger = logging.getLogger(__name__)

# never persisted
SENSITIVE_KEYS = {"cvv", "cvc", "password"}

def mask_details(details: dict) -> dict:
    out = {k: v for k, v in (details or {}).items() if k.lower() not in SENSITIVE_KEYS}
    card = out.pop("card_number", None)
    if card:
        digits = "".join(ch for ch in str(card) if ch.isdigit())
        out["card_last4"] = digits[-4:]
    return out

def create_payment(db: Session, caller: Caller, payload: PaymentCreate) -> Payment:
    payment = Payment(
        user_id=caller.user_id,
        amount=payload.amount,
        payment_method=payload.payment_method,
        status="pending",
    )
    payment.payment_details = mask_details(payload.payment_details)
    db.add(payment)
    commit(db, "create payment")
    db.refresh(payment)
    logger.info("payment %s created for user %s (%s %.2f)", payment.id, caller.user_id, payment.payment_method, payment.amount)
    return payment

def list_payments(db: Session, caller: Caller) -> list[Payment]:
    stmt = select(Payment).where(Payment.user_id == caller.user_id).order_by(desc(Payment.created_at))
    return list(db.scalars(stmt).all())
