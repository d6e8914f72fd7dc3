import html
import logging
import re

import requests

from app.shared.artifacts import save_json
from app.shared.config import settings
from app.shared.errors import ValidationError, BackendError

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

# kind -> (mailbox setting, subject prefix)
MAILBOXES = {
    "contact": ("CONTACT_EMAIL", "새로운 문의"),
    "inquiry": ("INQUIRY_EMAIL", "새로운 문의사항"),
}

def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))

def build_message(kind: str, email: str, name: str, message: str) -> dict:
    setting, subject = MAILBOXES[kind]
    body = (
        f"<p><strong>이름:</strong> {html.escape(name)}</p>"
        f"<p><strong>이메일:</strong> {html.escape(email)}</p>"
        f"<p><strong>문의내용:</strong><br/>{html.escape(message)}</p>"
    )
    return {
        "from": settings.EMAIL_FROM,
        "to": getattr(settings, setting),
        "subject": f"{subject}: {name}",
        "html": body,
        "reply_to": email,
    }

def send_email(msg: dict) -> dict:
    if not settings.RESEND_API_KEY:
        if settings.EMAIL_DRY_RUN:
            path = save_json("email-dry-run", msg)
            logger.info("email dry-run to %s saved at %s", msg["to"], path)
            return {"id": "dry-run", "status": "dry-run", "artifact_path": path}
        logger.error("RESEND_API_KEY is not set")
        raise BackendError("email provider is not configured")

    try:
        resp = requests.post(
            settings.RESEND_API_URL,
            headers={"Authorization": f"Bearer {settings.RESEND_API_KEY}"},
            json=msg,
            timeout=settings.EMAIL_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        logger.exception("email provider call failed")
        raise BackendError(f"email provider call failed: {e}") from e

    if resp.status_code >= 400:
        try:
            detail = resp.json().get("message") or resp.text
        except ValueError:
            detail = resp.text
        logger.error("email provider returned %s: %s", resp.status_code, detail)
        raise BackendError(detail or "email delivery failed")

    try:
        data = resp.json()
    except ValueError as e:
        logger.error("email provider returned a non-JSON body: %s", resp.text)
        raise BackendError("email provider returned an unreadable response") from e
    logger.info("email sent to %s: %s", msg["to"], data.get("id"))
    return data

def notify(kind: str, email: str | None, name: str | None, message: str | None) -> dict:
    email, name, message = (email or "").strip(), (name or "").strip(), (message or "").strip()
    if not email or not name or not message:
        raise ValidationError("name, email and message are required")
    if not is_valid_email(email):
        raise ValidationError("a valid email address is required (e.g. email@example.com)")
    return send_email(build_message(kind, email, name, message))
