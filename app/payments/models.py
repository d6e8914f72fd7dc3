from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Float, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.shared.db import Base
import uuid, json

def _id() -> str:
    return str(uuid.uuid4())

class Payment(Base):
    __tablename__ = "payments"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_id)
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    amount: Mapped[float] = mapped_column(Float)
    payment_method: Mapped[str] = mapped_column(String(32))
    # JSON text for SQLite; card data is masked before it gets here
    payment_details_json: Mapped[str] = mapped_column(Text, default="{}")
    status: Mapped[str] = mapped_column(String(16), default="pending")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)

    @property
    def payment_details(self) -> dict:
        try:
            return json.loads(self.payment_details_json or "{}")
        except ValueError:
            return {}

    @payment_details.setter
    def payment_details(self, val: dict):
        self.payment_details_json = json.dumps(val or {}, ensure_ascii=False)
