# bookshop/schemas/bookmark.py

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from bookshop.schemas.book import BookResponse


class BookmarkCreateRequest(BaseModel):
    book_id: UUID


class BookmarkResponse(BaseModel):
    id: UUID
    book: BookResponse
    bookmarked_at: datetime

    model_config = {"from_attributes": True}
