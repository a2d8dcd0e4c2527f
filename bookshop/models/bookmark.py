# bookshop/models/bookmark.py

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from bookshop.db.base_class import Base


class Bookmark(Base):
    """A book saved by a user. One bookmark per (user, book)."""
    __tablename__ = "bookmarks"
    __table_args__ = (
        UniqueConstraint("user_id", "book_id", name="uq_bookmarks_user_book"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    book_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    bookmarked_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    book = relationship("Book", back_populates="bookmarks")
    user = relationship("User", back_populates="bookmarks")

    def __repr__(self) -> str:
        return f"<Bookmark user_id={self.user_id} book_id={self.book_id}>"
