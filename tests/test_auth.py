import pytest

from app.auth.models import User
from app.shared.auth import create_access_token, resolve_identity, is_admin
from app.shared.errors import Unauthenticated, ProfileNotFound
from conftest import PASSWORD, auth


def test_register_starts_on_default_plan(client, db):
    r = client.post("/auth/register", json={"email": "New@EduAI.io", "password": "pw123456", "name": "Kim"})
    assert r.status_code == 201
    body = r.json()
    assert body["email"] == "new@eduai.io"
    assert body["is_admin"] is False
    assert body["plan"] == "라이트"
    assert (body["can_auto_click"], body["can_auto_play"], body["can_change_speed"], body["can_mute"], body["max_speed"]) == (
        True, False, False, True, 1.0,
    )


def test_register_duplicate_email(client):
    payload = {"email": "dup@eduai.io", "password": "pw123456", "name": "Lee"}
    assert client.post("/auth/register", json=payload).status_code == 201
    r = client.post("/auth/register", json=payload)
    assert r.status_code == 400
    assert r.json()["error"] == "email_already_registered"


def test_login_and_me(client, make_user):
    user = make_user(email="me@eduai.io")
    r = client.post("/auth/login", json={"email": "me@eduai.io", "password": PASSWORD})
    assert r.status_code == 200
    token = r.json()["access_token"]
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == user.id


def test_token_form_login(client, make_user):
    make_user(email="form@eduai.io")
    r = client.post("/auth/token", data={"username": "form@eduai.io", "password": PASSWORD})
    assert r.status_code == 200
    assert r.json()["token_type"] == "bearer"


def test_login_wrong_password(client, make_user):
    make_user(email="wrong@eduai.io")
    r = client.post("/auth/login", json={"email": "wrong@eduai.io", "password": "nope"})
    assert r.status_code == 401
    assert "error" in r.json()


def test_missing_and_garbage_token(client):
    assert client.get("/auth/me").status_code == 401
    r = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


def test_logout_revokes_token(client, make_user):
    user = make_user()
    headers = auth(user)
    assert client.post("/auth/logout", headers=headers).status_code == 200
    assert client.get("/auth/me", headers=headers).status_code == 401


def test_delete_account(client, db, make_user):
    user = make_user()
    headers = auth(user)
    r = client.request("DELETE", "/auth/account", json={"password": "bad"}, headers=headers)
    assert r.status_code == 401
    r = client.request("DELETE", "/auth/account", json={"password": PASSWORD}, headers=headers)
    assert r.status_code == 204
    db.expire_all()
    assert db.get(User, user.id) is None
    assert client.get("/auth/me", headers=headers).status_code == 401


def test_resolver_contract(db, make_user):
    admin = make_user(is_admin=True)
    assert resolve_identity(db, create_access_token(sub=admin.id)) == admin.id
    assert is_admin(db, admin.id) is True
    with pytest.raises(Unauthenticated):
        resolve_identity(db, None)
    with pytest.raises(ProfileNotFound):
        is_admin(db, "ghost")


def test_valid_token_without_profile(client):
    headers = {"Authorization": f"Bearer {create_access_token(sub='ghost')}"}
    r = client.get("/auth/me", headers=headers)
    assert r.status_code == 404
