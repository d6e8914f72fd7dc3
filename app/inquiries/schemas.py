from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

class InquiryCreate(BaseModel):
    title: str = Field(max_length=200)
    content: str

class InquiryUpdate(BaseModel):
    title: str | None = Field(default=None, max_length=200)
    content: str | None = None

class InquiryReply(BaseModel):
    reply: str

class InquiryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    title: str
    content: str
    user_id: str
    status: str
    reply: str | None = None
    reply_date: datetime | None = None
    created_at: datetime
