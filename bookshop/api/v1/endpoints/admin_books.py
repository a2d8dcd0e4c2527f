# bookshop/api/v1/endpoints/admin_books.py
# Book management (admin only)
#
# POST / PUT run the Open Library write pipeline (BookPersistProcessor).
# Pipeline errors propagate to the handlers registered in bookshop/main.py.

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from bookshop.core.dependencies import require_admin
from bookshop.db.session import get_db
from bookshop.models.book import Book
from bookshop.models.enums import BookCondition
from bookshop.models.user import User
from bookshop.schemas.book import AdminBookPage, AdminBookResponse, BookWriteRequest, PromotionRequest
from bookshop.schemas.common import MessageResponse
from bookshop.services.book_processor import BookPersistProcessor
from bookshop.services.catalog import MAX_ITEMS_PER_PAGE, book_query, paginate
from bookshop.services.openlibrary import OpenLibraryClient, get_openlibrary_client
from bookshop.services.persistence import RemoveProcessor

router = APIRouter()
logger = logging.getLogger("bookshop.admin_books")


def get_book_processor(
    db: Session = Depends(get_db),
    client: OpenLibraryClient = Depends(get_openlibrary_client),
) -> BookPersistProcessor:
    return BookPersistProcessor(db, client)


def _get_book_or_404(db: Session, book_id: UUID) -> Book:
    book = db.get(Book, book_id)
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.get("", response_model=AdminBookPage)
def list_books(
    title: Optional[str] = None,
    author: Optional[str] = None,
    condition: Optional[BookCondition] = None,
    order_title: Optional[str] = Query(None, alias="order[title]", pattern="^(asc|desc)$"),
    page: int = Query(1, ge=1),
    items_per_page: int = Query(30, ge=1, le=MAX_ITEMS_PER_PAGE),
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    query = book_query(db, title=title, author=author, condition=condition, order_title=order_title)
    items, total, total_pages = paginate(query, page, items_per_page)
    return AdminBookPage(
        page=page,
        items_per_page=items_per_page,
        total=total,
        total_pages=total_pages,
        items=[AdminBookResponse.model_validate(b) for b in items],
    )


@router.post("", response_model=AdminBookResponse, status_code=201)
def create_book(
    payload: BookWriteRequest,
    current_user: User = Depends(require_admin),
    processor: BookPersistProcessor = Depends(get_book_processor),
):
    logger.info(f"Create book: url='{payload.book}' by {current_user.email}")
    return processor.process(payload)


@router.get("/{book_id}", response_model=AdminBookResponse)
def get_book(book_id: UUID, current_user: User = Depends(require_admin), db: Session = Depends(get_db)):
    return _get_book_or_404(db, book_id)


@router.put("/{book_id}", response_model=AdminBookResponse)
def update_book(
    book_id: UUID,
    payload: BookWriteRequest,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db),
    processor: BookPersistProcessor = Depends(get_book_processor),
):
    book = _get_book_or_404(db, book_id)
    logger.info(f"Update book {book_id}: url='{payload.book}' by {current_user.email}")
    return processor.process(payload, book=book)


@router.post("/{book_id}/promotion", response_model=AdminBookResponse)
def change_promotion(
    book_id: UUID,
    payload: PromotionRequest,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db),
    processor: BookPersistProcessor = Depends(get_book_processor),
):
    """Set the promotion tier directly. This is how a book becomes Pro."""
    book = _get_book_or_404(db, book_id)
    return processor.change_promotion(book, payload.promotion_status)


@router.delete("/{book_id}", response_model=MessageResponse)
def delete_book(book_id: UUID, current_user: User = Depends(require_admin), db: Session = Depends(get_db)):
    book = _get_book_or_404(db, book_id)
    title = book.title
    RemoveProcessor(db).process(book)
    logger.info(f"Deleted book '{title}' ({book_id})")
    return MessageResponse(message=f"Book '{title}' deleted.")
