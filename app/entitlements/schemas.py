from enum import Enum
from typing import Any
from pydantic import BaseModel, Field

from app.shared.errors import InvalidField

class Permission(str, Enum):
    """Fields of a user record an admin may set one at a time."""
    CAN_AUTO_CLICK = "can_auto_click"
    CAN_AUTO_PLAY = "can_auto_play"
    CAN_CHANGE_SPEED = "can_change_speed"
    CAN_MUTE = "can_mute"
    MAX_SPEED = "max_speed"
    IS_ADMIN = "is_admin"

    @classmethod
    def parse(cls, raw: Any) -> "Permission":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            key = raw.strip()
            if key in _ALIASES:
                return _ALIASES[key]
            try:
                return cls(key)
            except ValueError:
                pass
        allowed = ", ".join(p.value for p in cls)
        raise InvalidField(f"invalid permission '{raw}'. allowed: {allowed}")

# compact spellings used by older admin clients
_ALIASES = {
    "canautoclick": Permission.CAN_AUTO_CLICK,
    "canautoplay": Permission.CAN_AUTO_PLAY,
    "canchangespeed": Permission.CAN_CHANGE_SPEED,
    "canmute": Permission.CAN_MUTE,
    "maxspeed": Permission.MAX_SPEED,
}

class PermissionIn(BaseModel):
    permission: str
    # checked per permission by the service
    value: Any = None

class PlanChangeIn(BaseModel):
    plan: str = Field(min_length=1)

class MaxSpeedIn(BaseModel):
    max_speed: Any = None
