# bookshop/schemas/book.py
# Pydantic request/response models for book endpoints

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from bookshop.models.enums import BookCondition, PromotionStatus
from bookshop.schemas.category import CategoryResponse
from bookshop.services.urls import is_https_url_with_tld


# ── Write ─────────────────────────────────────────────────────────────────────

class BookWriteRequest(BaseModel):
    """
    Body of POST / PUT /admin/books.
    title and author are not accepted: they always come from Open Library.
    """
    book: str = Field(
        ...,
        max_length=255,
        examples=["https://openlibrary.org/books/OL2055137M.json"],
    )
    condition: BookCondition
    is_promoted: Optional[bool] = None
    promotion_status: Optional[PromotionStatus] = None
    slug: Optional[str] = Field(None, min_length=5, max_length=255, pattern=r"^[a-z0-9-]+$")
    categories: Optional[List[int]] = None   # None keeps current categories on update

    @field_validator("book")
    @classmethod
    def book_is_https_url(cls, v: str) -> str:
        v = v.strip()
        if not is_https_url_with_tld(v):
            raise ValueError("Book must be an HTTPS URL with a top-level domain")
        return v


class PromotionRequest(BaseModel):
    promotion_status: PromotionStatus


# ── Read ──────────────────────────────────────────────────────────────────────

class BookResponse(BaseModel):
    id: UUID
    book: str
    title: str
    author: Optional[str] = None
    condition: BookCondition
    is_promoted: bool
    promotion_status: PromotionStatus
    slug: str
    rating: Optional[int] = None
    categories: List[CategoryResponse] = []

    model_config = {"from_attributes": True}


class AdminBookResponse(BookResponse):
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BookPage(BaseModel):
    """Paginated collection wrapper for GET /books."""
    page: int
    items_per_page: int
    total: int
    total_pages: int
    items: List[BookResponse]


class AdminBookPage(BookPage):
    items: List[AdminBookResponse]
