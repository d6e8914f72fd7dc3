# app/auth/api.py
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.auth import bearer, create_access_token, decode_token, get_caller, Caller
from app.shared.errors import Unauthenticated
from app.auth.schemas import RegisterIn, LoginIn, TokenOut, DeleteAccountIn, UserOut
from app.auth.service import register_user, authenticate_user, get_profile, revoke_token, delete_account

router = APIRouter(prefix="/auth", tags=["Auth"])

def _issue(db: Session, email: str, password: str) -> dict:
    user = authenticate_user(db, email, password)
    if not user:
        raise Unauthenticated("invalid credentials")
    return {"access_token": create_access_token(sub=user.id), "token_type": "bearer"}

@router.post("/register", response_model=UserOut, status_code=201)
def api_register(inb: RegisterIn, db: Session = Depends(get_db)):
    return register_user(db, inb.email, inb.password, inb.name)

@router.post("/token", response_model=TokenOut)
def api_token(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    # Swagger "Authorize" flow; username is the email
    return _issue(db, form.username, form.password)

@router.post("/login", response_model=TokenOut)
def api_login(inb: LoginIn, db: Session = Depends(get_db)):
    return _issue(db, inb.email, inb.password)

@router.post("/logout")
def api_logout(
    creds: HTTPAuthorizationCredentials = Depends(bearer),
    caller: Caller = Depends(get_caller),
    db: Session = Depends(get_db),
):
    payload = decode_token(creds.credentials)
    revoke_token(db, payload.get("jti"), caller.user_id)
    return {"ok": True}

@router.get("/me", response_model=UserOut)
def api_me(caller: Caller = Depends(get_caller), db: Session = Depends(get_db)):
    return get_profile(db, caller.user_id)

@router.delete("/account", status_code=204)
def api_delete_account(
    inb: DeleteAccountIn,
    creds: HTTPAuthorizationCredentials = Depends(bearer),
    caller: Caller = Depends(get_caller),
    db: Session = Depends(get_db),
):
    payload = decode_token(creds.credentials)
    delete_account(db, caller.user_id, inb.password, jti=payload.get("jti"))
