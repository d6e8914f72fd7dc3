from sqlalchemy import String, Boolean, Float, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from app.shared.db import Base
import uuid

def _id() -> str:
    return str(uuid.uuid4())

class Plan(Base):
    __tablename__ = "plans"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_id)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

class PlanFeature(Base):
    """Feature template granted to a user who switches to the plan (one per plan)."""
    __tablename__ = "plan_features"
    plan_id: Mapped[str] = mapped_column(String(36), ForeignKey("plans.id", ondelete="CASCADE"), primary_key=True)
    can_auto_click: Mapped[bool] = mapped_column(Boolean, default=False)
    can_auto_play: Mapped[bool] = mapped_column(Boolean, default=False)
    can_change_speed: Mapped[bool] = mapped_column(Boolean, default=False)
    can_mute: Mapped[bool] = mapped_column(Boolean, default=True)
    max_speed: Mapped[float] = mapped_column(Float, default=1.0)
