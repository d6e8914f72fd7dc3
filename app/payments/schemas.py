from datetime import datetime
from typing import Any
from pydantic import BaseModel, Field, ConfigDict

class PaymentCreate(BaseModel):
    amount: float = Field(gt=0)
    payment_method: str = Field(default="card", pattern="^(card|bank_transfer)$")
    payment_details: dict[str, Any] = Field(default_factory=dict)

class PaymentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    user_id: str
    amount: float
    payment_method: str
    payment_details: dict[str, Any]
    status: str
    created_at: datetime
