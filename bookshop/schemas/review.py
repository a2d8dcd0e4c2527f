# bookshop/schemas/review.py

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class ReviewCreateRequest(BaseModel):
    body: str
    rating: int = Field(..., ge=1, le=5)

    @field_validator("body")
    @classmethod
    def body_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Review body cannot be empty")
        return v


class ReviewAuthor(BaseModel):
    id: UUID
    name: str

    model_config = {"from_attributes": True}


class ReviewResponse(BaseModel):
    id: UUID
    book_id: UUID
    body: str
    rating: int
    user: ReviewAuthor
    published_at: datetime

    model_config = {"from_attributes": True}
