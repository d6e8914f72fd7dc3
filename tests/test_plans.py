import pytest

from app.plans.models import Plan
from app.plans.schemas import PlanFeaturesIn
from app.plans.service import list_plans, upsert_plan_features, get_plan_features, seed_default_plans
from app.shared.errors import Forbidden, NotFound, PlanNotFound, ValidationError
from conftest import auth, caller_of


def test_upsert_inserts_then_replaces(db, make_user, make_plan):
    admin = make_user(is_admin=True)
    plan = make_plan("Pro")
    with pytest.raises(NotFound):
        get_plan_features(db, plan.id)

    upsert_plan_features(db, caller_of(admin), plan.id, PlanFeaturesIn(can_auto_play=True, max_speed=2.0))
    upsert_plan_features(db, caller_of(admin), plan.id, PlanFeaturesIn(can_auto_click=True, max_speed=3.0))

    tpl = get_plan_features(db, plan.id)
    assert (tpl.can_auto_click, tpl.can_auto_play, tpl.max_speed) == (True, False, 3.0)


def test_upsert_validation_and_auth(db, make_user, make_plan):
    admin, member = make_user(is_admin=True), make_user()
    plan = make_plan("Pro")
    with pytest.raises(Forbidden):
        upsert_plan_features(db, caller_of(member), plan.id, PlanFeaturesIn())
    with pytest.raises(ValidationError):
        upsert_plan_features(db, caller_of(admin), plan.id, PlanFeaturesIn(max_speed=4.0))
    with pytest.raises(PlanNotFound):
        upsert_plan_features(db, caller_of(admin), "missing", PlanFeaturesIn())


def test_seed_runs_once(db):
    assert seed_default_plans(db) == 2
    assert seed_default_plans(db) == 0
    names = [p.name for p in list_plans(db)]
    assert "라이트" in names and len(names) == 2


def test_plan_endpoints(client, db, make_user, make_plan):
    admin = make_user(is_admin=True)
    plan = make_plan("Basic", description="starter")
    r = client.get("/plans")
    assert r.status_code == 200
    assert r.json() == [{"id": plan.id, "name": "Basic", "description": "starter"}]

    assert client.get(f"/plans/{plan.id}/features").status_code == 404

    body = {"can_auto_click": True, "can_auto_play": False, "can_change_speed": True, "can_mute": False, "max_speed": 1.5}
    r = client.put(f"/plans/{plan.id}/features", json=body, headers=auth(admin))
    assert r.status_code == 200
    assert r.json() == {"plan_id": plan.id, **body}

    r = client.get(f"/plans/{plan.id}/features")
    assert r.status_code == 200 and r.json()["max_speed"] == 1.5
    assert db.get(Plan, plan.id) is not None
