from fastapi import APIRouter
from pydantic import BaseModel

from app.shared.http import ok, fail
from app.shared.errors import AppError
from .service import notify

router = APIRouter(prefix="/api", tags=["Notifications"])

class EmailIn(BaseModel):
    # presence and format are checked by the service so they answer 400
    email: str | None = None
    name: str | None = None
    message: str | None = None

def _send(kind: str, inb: EmailIn):
    try:
        return ok(notify(kind, inb.email, inb.name, inb.message))
    except AppError as e:
        return fail(e.message, status=e.status_code)

@router.post("/send-email")
def api_contact_email(inb: EmailIn):
    return _send("contact", inb)

@router.post("/inquiry/send-email")
def api_inquiry_email(inb: EmailIn):
    return _send("inquiry", inb)
