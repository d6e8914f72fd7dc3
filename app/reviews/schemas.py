from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

# rating range is checked in the service so it surfaces as a 400
class ReviewCreate(BaseModel):
    title: str = Field(max_length=200)
    content: str
    rating: int
    region: str | None = None
    organization: str | None = None

class ReviewUpdate(ReviewCreate):
    pass

class ReviewOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    title: str
    content: str
    rating: int
    region: str | None = None
    organization: str | None = None
    user_id: str
    created_at: datetime
