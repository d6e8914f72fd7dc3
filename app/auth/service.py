import logging
import uuid, bcrypt
from sqlalchemy.orm import Session
from app.auth.models import User, RevokedToken
from app.shared.config import settings
from app.shared.db import commit
from app.shared.errors import ValidationError, Unauthenticated, NotFound

logger = logging.getLogger(__name__)

# entitlement every new account starts with
SIGNUP_ENTITLEMENT = {
    "can_auto_click": True,
    "can_auto_play": False,
    "can_change_speed": False,
    "can_mute": True,
    "max_speed": 1.0,
}

def _hash(pw: str) -> str:
    return bcrypt.hashpw(pw.encode(), bcrypt.gensalt()).decode()

def _verify(pw: str, ph: str) -> bool:
    try: return bcrypt.checkpw(pw.encode(), ph.encode())
    except ValueError: return False

def register_user(db: Session, email: str, password: str, name: str) -> User:
    email = email.lower().strip()
    name = (name or "").strip()
    if not name:
        raise ValidationError("name is required")
    if db.query(User).filter(User.email == email).first():
        raise ValidationError("email_already_registered")
    u = User(
        id=str(uuid.uuid4()),
        email=email,
        password_hash=_hash(password),
        name=name,
        is_admin=False,
        plan=settings.DEFAULT_PLAN,
        **SIGNUP_ENTITLEMENT,
    )
    db.add(u)
    commit(db, "register user")
    db.refresh(u)
    logger.info("registered user %s", u.id)
    return u

def authenticate_user(db: Session, email: str, password: str) -> User | None:
    u = db.query(User).filter(User.email == email.lower().strip()).first()
    if not u or not _verify(password, u.password_hash):
        return None
    return u

def get_profile(db: Session, user_id: str) -> User:
    u = db.get(User, user_id)
    if not u:
        raise NotFound("user not found")
    return u

def revoke_token(db: Session, jti: str | None, user_id: str):
    if not jti or db.get(RevokedToken, jti):
        return
    db.add(RevokedToken(jti=jti, user_id=user_id))
    commit(db, "sign out")
    logger.info("revoked token for user %s", user_id)

def delete_account(db: Session, user_id: str, password: str, jti: str | None = None):
    u = get_profile(db, user_id)
    if not _verify(password, u.password_hash):
        raise Unauthenticated("password does not match")
    db.delete(u)
    if jti:
        db.add(RevokedToken(jti=jti, user_id=user_id))
    commit(db, "delete account")
    logger.info("deleted account %s", user_id)
