# bookshop/api/v1/endpoints/books.py
# Public catalogue: browse books and their reviews.
# Writing a review requires login; everything else is anonymous.

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from bookshop.core.dependencies import require_login
from bookshop.db.session import get_db
from bookshop.models.book import Book
from bookshop.models.enums import BookCondition
from bookshop.models.review import Review
from bookshop.models.user import User
from bookshop.schemas.book import BookPage, BookResponse
from bookshop.schemas.review import ReviewCreateRequest, ReviewResponse
from bookshop.services.catalog import MAX_ITEMS_PER_PAGE, book_query, paginate

router = APIRouter()
logger = logging.getLogger("bookshop.books")


def _get_book_or_404(db: Session, book_id: UUID) -> Book:
    book = db.get(Book, book_id)
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.get("", response_model=BookPage, summary="Browse the catalogue")
def list_books(
    title: Optional[str] = None,
    author: Optional[str] = None,
    condition: Optional[BookCondition] = None,
    order_title: Optional[str] = Query(None, alias="order[title]", pattern="^(asc|desc)$"),
    page: int = Query(1, ge=1),
    items_per_page: int = Query(30, ge=1, le=MAX_ITEMS_PER_PAGE),
    db: Session = Depends(get_db),
):
    query = book_query(db, title=title, author=author, condition=condition, order_title=order_title)
    items, total, total_pages = paginate(query, page, items_per_page)
    return BookPage(
        page=page,
        items_per_page=items_per_page,
        total=total,
        total_pages=total_pages,
        items=[BookResponse.model_validate(b) for b in items],
    )


@router.get("/{book_id}", response_model=BookResponse)
def get_book(book_id: UUID, db: Session = Depends(get_db)):
    return _get_book_or_404(db, book_id)


@router.get("/{book_id}/reviews", response_model=List[ReviewResponse])
def list_reviews(
    book_id: UUID,
    skip: int = Query(0, ge=0),
    limit: int = Query(30, ge=1, le=MAX_ITEMS_PER_PAGE),
    db: Session = Depends(get_db),
):
    _get_book_or_404(db, book_id)
    return (
        db.query(Review)
        .filter(Review.book_id == book_id)
        .order_by(Review.published_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


@router.post("/{book_id}/reviews", response_model=ReviewResponse, status_code=201)
def create_review(
    book_id: UUID,
    payload: ReviewCreateRequest,
    current_user: User = Depends(require_login),
    db: Session = Depends(get_db),
):
    book = _get_book_or_404(db, book_id)
    review = Review(book=book, user=current_user, body=payload.body, rating=payload.rating)
    db.add(review)
    db.commit()
    db.refresh(review)
    logger.info(f"Review {review.id} on book {book_id} by {current_user.email}")
    return review
