# bookshop/models/user.py
# Users are provisioned by the identity provider (or init_db seeding).
# This API only reads them to attribute reviews and bookmarks.

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.orm import relationship

from bookshop.db.base_class import Base
from bookshop.models.enums import UserRole, enum_column


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # ── Identity ──────────────────────────────────────────────────────────────
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)

    # ── Role ──────────────────────────────────────────────────────────────────
    role = Column(
        enum_column(UserRole, "user_role_enum", length=20),
        nullable=False,
        default=UserRole.USER,
    )

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # ── Relationships ─────────────────────────────────────────────────────────
    reviews = relationship("Review", back_populates="user", cascade="all, delete-orphan")
    bookmarks = relationship("Bookmark", back_populates="user", cascade="all, delete-orphan")

    @property
    def name(self) -> str:
        full = " ".join(p for p in (self.first_name, self.last_name) if p)
        return full or self.email

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email} role={self.role}>"
