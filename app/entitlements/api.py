from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.auth import get_caller, Caller
from app.auth.schemas import UserOut, EntitlementOut
from app.entitlements.schemas import PermissionIn, PlanChangeIn, MaxSpeedIn, Permission
from app.entitlements.service import (
    list_users,
    get_user_entitlement,
    set_user_entitlement_field,
    apply_plan,
)

router = APIRouter(tags=["Entitlements"])

@router.get("/api/admin/users", response_model=list[UserOut])
def api_list_users(caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return list_users(db, caller)

@router.patch("/api/admin/users/{user_id}/permissions", response_model=UserOut)
def api_set_permission(
    user_id: str,
    payload: PermissionIn,
    caller: Caller = Depends(get_caller),
    db: Session = Depends(get_db),
):
    return set_user_entitlement_field(db, caller, user_id, payload.permission, payload.value)

@router.patch("/api/admin/users/{user_id}/max-speed", response_model=UserOut)
def api_set_max_speed(
    user_id: str,
    payload: MaxSpeedIn,
    caller: Caller = Depends(get_caller),
    db: Session = Depends(get_db),
):
    return set_user_entitlement_field(db, caller, user_id, Permission.MAX_SPEED, payload.max_speed)

@router.patch("/api/admin/users/{user_id}/plan", response_model=UserOut)
def api_apply_plan(
    user_id: str,
    payload: PlanChangeIn,
    caller: Caller = Depends(get_caller),
    db: Session = Depends(get_db),
):
    return apply_plan(db, caller, user_id, payload.plan)

@router.get("/users/{user_id}/entitlement", response_model=EntitlementOut)
def api_get_entitlement(user_id: str, caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return get_user_entitlement(db, caller, user_id)
