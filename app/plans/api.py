from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.auth import get_caller, Caller
from app.plans.schemas import PlanOut, PlanFeaturesIn, PlanFeaturesOut
from app.plans.service import list_plans, get_plan_features, upsert_plan_features

router = APIRouter(prefix="/plans", tags=["Plans"])

@router.get("", response_model=list[PlanOut])
def api_list_plans(db: Session = Depends(get_db)):
    return list_plans(db)

@router.get("/{plan_id}/features", response_model=PlanFeaturesOut)
def api_get_features(plan_id: str, db: Session = Depends(get_db)):
    return get_plan_features(db, plan_id)

@router.put("/{plan_id}/features", response_model=PlanFeaturesOut)
def api_put_features(
    plan_id: str,
    payload: PlanFeaturesIn,
    caller: Caller = Depends(get_caller),
    db: Session = Depends(get_db),
):
    return upsert_plan_features(db, caller, plan_id, payload)
