from pydantic import BaseModel, ConfigDict, Field

FEATURE_FIELDS = ("can_auto_click", "can_auto_play", "can_change_speed", "can_mute", "max_speed")

class PlanOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    name: str
    description: str | None = None

class PlanFeaturesIn(BaseModel):
    can_auto_click: bool = False
    can_auto_play: bool = False
    can_change_speed: bool = False
    can_mute: bool = True
    max_speed: float = Field(default=1.0, description="Playback speed cap, 0.5 to 3.0")

class PlanFeaturesOut(PlanFeaturesIn):
    model_config = ConfigDict(from_attributes=True)
    plan_id: str
