# bookshop/models/enums.py
# Closed enumerations shared by ORM models, schemas and services.
# Persisted by value (see enum_column) so stored strings match the API.

import enum

from sqlalchemy import Enum


class PromotionStatus(str, enum.Enum):
    """Promotion tier governing a book's visibility."""
    NONE = "None"
    BASIC = "Basic"
    PRO = "Pro"


class BookCondition(str, enum.Enum):
    """https://schema.org/OfferItemCondition"""
    NEW = "https://schema.org/NewCondition"
    REFURBISHED = "https://schema.org/RefurbishedCondition"
    DAMAGED = "https://schema.org/DamagedCondition"
    USED = "https://schema.org/UsedCondition"


class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


def enum_column(enum_cls, name: str, length: int = 255) -> Enum:
    """VARCHAR-backed SQLAlchemy Enum storing member values, not names."""
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        length=length,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
