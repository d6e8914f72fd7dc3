import logging
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.plans.models import Plan, PlanFeature
from app.plans.schemas import PlanFeaturesIn, FEATURE_FIELDS
from app.shared.auth import Caller, require_admin
from app.shared.db import commit
from app.shared.errors import NotFound, PlanNotFound, ValidationError

logger = logging.getLogger(__name__)

MIN_SPEED, MAX_SPEED = 0.5, 3.0

# catalogue written on first start when the plans table is empty
DEFAULT_PLANS = [
    {
        "name": "라이트",
        "description": "Auto-click and mute at normal speed",
        "features": {"can_auto_click": True, "can_auto_play": False, "can_change_speed": False, "can_mute": True, "max_speed": 1.0},
    },
    {
        "name": "프로",
        "description": "Every automation feature, up to 3x speed",
        "features": {"can_auto_click": True, "can_auto_play": True, "can_change_speed": True, "can_mute": True, "max_speed": 3.0},
    },
]

def list_plans(db: Session) -> list[Plan]:
    return list(db.scalars(select(Plan).order_by(Plan.name)).all())

def get_plan(db: Session, plan_id: str) -> Plan:
    plan = db.get(Plan, plan_id)
    if not plan:
        raise PlanNotFound(f"plan {plan_id} not found")
    return plan

def get_plan_by_name(db: Session, name: str) -> Plan:
    plan = db.scalars(select(Plan).where(Plan.name == name)).first()
    if not plan:
        raise PlanNotFound(f"plan '{name}' not found")
    return plan

def get_plan_features(db: Session, plan_id: str) -> PlanFeature:
    tpl = db.get(PlanFeature, plan_id)
    if not tpl:
        raise NotFound(f"no feature template for plan {plan_id}")
    return tpl

def upsert_plan_features(db: Session, caller: Caller, plan_id: str, payload: PlanFeaturesIn) -> PlanFeature:
    require_admin(caller, "editing plan features")
    get_plan(db, plan_id)
    if not (MIN_SPEED <= payload.max_speed <= MAX_SPEED):
        raise ValidationError(f"max_speed must be between {MIN_SPEED} and {MAX_SPEED}")

    tpl = db.get(PlanFeature, plan_id)
    if tpl is None:
        tpl = PlanFeature(plan_id=plan_id)
        db.add(tpl)
    for field in FEATURE_FIELDS:
        setattr(tpl, field, getattr(payload, field))
    commit(db, "save plan features")
    db.refresh(tpl)
    logger.info("plan %s features saved by %s", plan_id, caller.user_id)
    return tpl

def seed_default_plans(db: Session) -> int:
    if db.scalars(select(Plan)).first():
        return 0
    for entry in DEFAULT_PLANS:
        plan = Plan(name=entry["name"], description=entry["description"])
        db.add(plan)
        db.flush()
        db.add(PlanFeature(plan_id=plan.id, **entry["features"]))
    commit(db, "seed plans")
    logger.info("seeded %d default plans", len(DEFAULT_PLANS))
    return len(DEFAULT_PLANS)
