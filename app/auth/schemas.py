from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field

class RegisterIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=1, max_length=100)

class LoginIn(BaseModel):
    email: EmailStr
    password: str

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"

class DeleteAccountIn(BaseModel):
    password: str

class EntitlementOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    can_auto_click: bool
    can_auto_play: bool
    can_change_speed: bool
    can_mute: bool
    max_speed: float

class UserOut(EntitlementOut):
    id: str
    email: str
    name: str | None = None
    is_admin: bool
    plan: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
