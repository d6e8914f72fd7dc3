import os

# settings are read at import time
os.environ["JWT_KEY"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RESEND_API_KEY"] = ""
os.environ["EMAIL_DRY_RUN"] = "false"

import uuid

import bcrypt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.shared.db import Base, get_db
from app.shared.auth import Caller, create_access_token
from app.auth.models import User
from app.plans.models import Plan, PlanFeature

PASSWORD = "secret123"
PASSWORD_HASH = bcrypt.hashpw(PASSWORD.encode(), bcrypt.gensalt(rounds=4)).decode()

engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def _get_db():
        yield db
    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make(is_admin: bool = False, user_id: str | None = None, name: str = "tester", **fields) -> User:
        uid = user_id or str(uuid.uuid4())
        user = User(
            id=uid,
            email=fields.pop("email", f"{uid[:8]}@eduai.io"),
            password_hash=PASSWORD_HASH,
            name=name,
            is_admin=is_admin,
            plan=fields.pop("plan", "라이트"),
            can_auto_click=fields.pop("can_auto_click", True),
            can_auto_play=fields.pop("can_auto_play", False),
            can_change_speed=fields.pop("can_change_speed", False),
            can_mute=fields.pop("can_mute", True),
            max_speed=fields.pop("max_speed", 1.0),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make


@pytest.fixture
def make_plan(db):
    def _make(name: str, features: dict | None = None, description: str | None = None) -> Plan:
        plan = Plan(name=name, description=description)
        db.add(plan)
        db.flush()
        if features is not None:
            db.add(PlanFeature(plan_id=plan.id, **features))
        db.commit()
        db.refresh(plan)
        return plan
    return _make


def caller_of(user: User) -> Caller:
    return Caller(user_id=user.id, is_admin=user.is_admin)


def auth(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(sub=user.id)}"}
