"""
Per-user entitlement store and plan propagation.

A user's entitlement (the four feature flags plus the speed cap) lives on the
user row. Switching plans copies the plan's feature template onto it; admins
may afterwards override single fields, and the two paths are never reconciled.
"""
import logging
import math
from numbers import Real
from typing import Any

from sqlalchemy import select, desc
from sqlalchemy.orm import Session

from app.auth.models import User
from app.auth.schemas import EntitlementOut
from app.entitlements.schemas import Permission
from app.plans.schemas import FEATURE_FIELDS
from app.plans.service import get_plan_by_name
from app.plans.models import PlanFeature
from app.shared.auth import Caller, require_admin, require_owner_or_admin
from app.shared.db import commit
from app.shared.errors import NotFound, InvalidValue

logger = logging.getLogger(__name__)

# used when a plan has no feature template yet
DEFAULT_TEMPLATE = {
    "can_auto_click": False,
    "can_auto_play": False,
    "can_change_speed": False,
    "can_mute": True,
    "max_speed": 1.0,
}

def _get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFound(f"user {user_id} not found")
    return user

def list_users(db: Session, caller: Caller) -> list[User]:
    require_admin(caller, "listing users")
    stmt = select(User).order_by(desc(User.created_at), desc(User.id))
    return list(db.scalars(stmt).all())

def get_user_entitlement(db: Session, caller: Caller, user_id: str) -> EntitlementOut:
    require_owner_or_admin(caller, user_id, "reading entitlements")
    return EntitlementOut.model_validate(_get_user(db, user_id))

def _check_value(permission: Permission, value: Any):
    if permission is Permission.MAX_SPEED:
        # bool is a Real subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value) or value < 0:
            raise InvalidValue("max_speed must be a finite number >= 0")
        return float(value)
    if not isinstance(value, bool):
        raise InvalidValue(f"{permission.value} must be a boolean")
    return value

def set_user_entitlement_field(db: Session, caller: Caller, user_id: str, permission: Any, value: Any) -> User:
    require_admin(caller, "changing user permissions")
    perm = Permission.parse(permission)
    value = _check_value(perm, value)
    user = _get_user(db, user_id)
    setattr(user, perm.value, value)
    commit(db, f"update {perm.value}")
    db.refresh(user)
    logger.info("admin %s set %s=%r on user %s", caller.user_id, perm.value, value, user_id)
    return user

def plan_template(db: Session, plan_id: str) -> dict:
    tpl = db.get(PlanFeature, plan_id)
    if tpl is None:
        logger.warning("plan %s has no feature template; using defaults", plan_id)
        return dict(DEFAULT_TEMPLATE)
    return {field: getattr(tpl, field) for field in FEATURE_FIELDS}

def apply_plan(db: Session, caller: Caller, user_id: str, plan_name: str) -> User:
    """
    Switch a user to `plan_name` and copy the plan's feature template onto them.

    The plan name and the five fields are written in one transaction; a
    failed commit rolls all of them back and raises BackendError. Safe to
    re-run: it always converges to the template values.
    """
    require_admin(caller, "changing user plans")
    plan = get_plan_by_name(db, plan_name)
    template = plan_template(db, plan.id)
    user = _get_user(db, user_id)

    user.plan = plan.name
    for field, value in template.items():
        setattr(user, field, value)
    commit(db, f"apply plan '{plan.name}'")
    db.refresh(user)
    logger.info("admin %s applied plan '%s' to user %s", caller.user_id, plan.name, user_id)
    return user
