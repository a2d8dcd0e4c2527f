# bookshop/services/catalog.py
# Read-side helpers shared by the public and admin book listings.

import math
from typing import List, Optional, Tuple

from sqlalchemy.orm import Query, Session, selectinload

from bookshop.models.book import Book
from bookshop.models.enums import BookCondition

MAX_ITEMS_PER_PAGE = 100


def book_query(
    db: Session,
    title: Optional[str] = None,
    author: Optional[str] = None,
    condition: Optional[BookCondition] = None,
    order_title: Optional[str] = None,
) -> Query:
    """
    Books filtered by partial, case-insensitive title/author and exact condition.
    order_title: "asc" | "desc" | None (newest first).
    """
    query = db.query(Book).options(
        selectinload(Book.categories),
        selectinload(Book.reviews),
    )
    if title:
        query = query.filter(Book.title.ilike(f"%{title}%"))
    if author:
        query = query.filter(Book.author.ilike(f"%{author}%"))
    if condition:
        query = query.filter(Book.condition == condition)

    if order_title == "desc":
        query = query.order_by(Book.title.desc(), Book.id)
    elif order_title == "asc":
        query = query.order_by(Book.title.asc(), Book.id)
    else:
        query = query.order_by(Book.created_at.desc(), Book.id)
    return query


def paginate(query: Query, page: int, items_per_page: int) -> Tuple[List, int, int]:
    """Returns (items, total, total_pages) for a 1-based page."""
    total = query.order_by(None).count()
    items = query.offset((page - 1) * items_per_page).limit(items_per_page).all()
    total_pages = math.ceil(total / items_per_page) if total else 0
    return items, total, total_pages
