# app/shared/auth.py
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError  # python-jose[cryptography]
from sqlalchemy.orm import Session

from app.auth.models import User, RevokedToken
from app.shared.config import settings
from app.shared.db import get_db
from app.shared.errors import Unauthenticated, Forbidden, ProfileNotFound

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False, scheme_name="bearerAuth")


@dataclass(frozen=True)
class Caller:
    """Identity context handed to every service call."""
    user_id: str
    is_admin: bool = False


def create_access_token(
    sub: str,
    extra: Optional[Dict[str, Any]] = None,
    minutes: Optional[int] = None,
) -> str:
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=minutes or settings.JWT_EXPIRE_MIN)
    payload: Dict[str, Any] = {
        "sub": sub,
        "jti": uuid.uuid4().hex,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    if settings.JWT_ISS:
        payload["iss"] = settings.JWT_ISS
    if settings.JWT_AUD:
        payload["aud"] = settings.JWT_AUD
    if extra:
        payload.update(extra)
    return jwt.encode(payload, settings.JWT_KEY, algorithm=settings.JWT_ALG)


def decode_token(token: str) -> Dict[str, Any]:
    try:
        payload = jwt.decode(
            token,
            settings.JWT_KEY,
            algorithms=[settings.JWT_ALG],
            audience=settings.JWT_AUD,
            issuer=settings.JWT_ISS,
            options={
                "verify_aud": bool(settings.JWT_AUD),
                "verify_iss": bool(settings.JWT_ISS),
            },
        )
    except JWTError as e:
        raise Unauthenticated(f"invalid token: {e}")
    if not payload.get("sub"):
        raise Unauthenticated("invalid token: missing sub")
    return payload


def resolve_identity(db: Session, token: str | None) -> str:
    """Bearer credential -> identity id."""
    if not token:
        raise Unauthenticated("missing bearer token")
    payload = decode_token(token)
    jti = payload.get("jti")
    if jti and db.get(RevokedToken, jti):
        raise Unauthenticated("token has been revoked")
    return payload["sub"]


def is_admin(db: Session, user_id: str) -> bool:
    user = db.get(User, user_id)
    if not user:
        raise ProfileNotFound(f"no profile for user {user_id}")
    return bool(user.is_admin)


def get_caller(
    creds: HTTPAuthorizationCredentials = Depends(bearer),
    db: Session = Depends(get_db),
) -> Caller:
    user_id = resolve_identity(db, creds.credentials if creds else None)
    return Caller(user_id=user_id, is_admin=is_admin(db, user_id))


def require_admin(caller: Caller, action: str = "this action"):
    if not caller.is_admin:
        logger.warning("admin required for %s: user=%s", action, caller.user_id)
        raise Forbidden(f"admin role required for {action}")


def require_owner_or_admin(caller: Caller, owner_id: str | None, action: str = "this action"):
    if caller.is_admin or (owner_id is not None and owner_id == caller.user_id):
        return
    logger.warning("owner or admin required for %s: user=%s owner=%s", action, caller.user_id, owner_id)
    raise Forbidden(f"only the author or an admin may perform {action}")


def require_owner(caller: Caller, owner_id: str | None, action: str = "this action"):
    if owner_id is None or owner_id != caller.user_id:
        logger.warning("owner required for %s: user=%s owner=%s", action, caller.user_id, owner_id)
        raise Forbidden(f"only the author may perform {action}")
