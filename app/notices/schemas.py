from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

class NoticeCreate(BaseModel):
    title: str = Field(max_length=200)
    content: str
    is_important: bool = False

class NoticeUpdate(BaseModel):
    title: str | None = Field(default=None, max_length=200)
    content: str | None = None
    is_important: bool | None = None

class NoticeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    title: str
    content: str
    is_important: bool
    user_id: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
