# bookshop/models/book.py
# A book offered in the shop, identified externally by its Open Library URL.
# title / author are overwritten from Open Library on every write
# (see bookshop/services/book_processor.py); they are never re-synced later.

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, Column, DateTime, String, Text, Uuid
from sqlalchemy.orm import relationship

from bookshop.db.base_class import Base
from bookshop.models.category import book_categories
from bookshop.models.enums import BookCondition, PromotionStatus, enum_column


class Book(Base):
    __tablename__ = "books"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # ── Source ────────────────────────────────────────────────────────────────
    book = Column(String(255), unique=True, nullable=False)   # Open Library URL

    # ── Enriched metadata ─────────────────────────────────────────────────────
    title = Column(Text, nullable=False)
    author = Column(String(255), nullable=True)

    condition = Column(
        enum_column(BookCondition, "book_condition_enum"),
        nullable=False,
    )

    # ── Promotion ─────────────────────────────────────────────────────────────
    # promotion_status is canonical; is_promoted mirrors status != None
    is_promoted = Column(Boolean, nullable=False, default=False)
    promotion_status = Column(
        enum_column(PromotionStatus, "promotion_status_enum", length=20),
        nullable=False,
    )

    slug = Column(String(255), unique=True, nullable=False, index=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # ── Relationships ─────────────────────────────────────────────────────────
    categories = relationship(
        "Category", secondary=book_categories, back_populates="books",
        order_by="Category.id",
    )
    reviews = relationship(
        "Review", back_populates="book", cascade="all, delete-orphan",
        order_by="Review.published_at",
    )
    bookmarks = relationship("Bookmark", back_populates="book", cascade="all, delete-orphan")

    @property
    def rating(self) -> Optional[int]:
        """Average review rating, rounded. None when nobody has reviewed the book."""
        ratings = [r.rating for r in self.reviews if r.rating is not None]
        if not ratings:
            return None
        return round(sum(ratings) / len(ratings))

    def __repr__(self) -> str:
        return f"<Book id={self.id} slug={self.slug} status={self.promotion_status}>"
