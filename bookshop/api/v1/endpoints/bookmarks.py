# bookshop/api/v1/endpoints/bookmarks.py
# The current user's bookmarks. Login required for every route.

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import and_
from sqlalchemy.orm import Session

from bookshop.core.dependencies import require_login
from bookshop.db.session import get_db
from bookshop.models.book import Book
from bookshop.models.bookmark import Bookmark
from bookshop.models.user import User
from bookshop.schemas.bookmark import BookmarkCreateRequest, BookmarkResponse
from bookshop.schemas.common import MessageResponse

router = APIRouter()
logger = logging.getLogger("bookshop.bookmarks")


@router.get("", response_model=List[BookmarkResponse])
def list_bookmarks(current_user: User = Depends(require_login), db: Session = Depends(get_db)):
    return (
        db.query(Bookmark)
        .filter(Bookmark.user_id == current_user.id)
        .order_by(Bookmark.bookmarked_at.desc())
        .all()
    )


@router.post("", response_model=BookmarkResponse, status_code=201)
def create_bookmark(
    payload: BookmarkCreateRequest,
    current_user: User = Depends(require_login),
    db: Session = Depends(get_db),
):
    book = db.get(Book, payload.book_id)
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")

    existing = db.query(Bookmark).filter(
        and_(Bookmark.user_id == current_user.id, Bookmark.book_id == book.id)
    ).first()
    if existing:
        raise HTTPException(status_code=409, detail="Book already bookmarked.")

    bookmark = Bookmark(book=book, user=current_user)
    db.add(bookmark)
    db.commit()
    db.refresh(bookmark)
    logger.info(f"Bookmark {bookmark.id}: {current_user.email} -> {book.id}")
    return bookmark


@router.delete("/{bookmark_id}", response_model=MessageResponse)
def delete_bookmark(
    bookmark_id: UUID,
    current_user: User = Depends(require_login),
    db: Session = Depends(get_db),
):
    bookmark = db.query(Bookmark).filter(
        and_(Bookmark.id == bookmark_id, Bookmark.user_id == current_user.id)
    ).first()
    if not bookmark:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    db.delete(bookmark)
    db.commit()
    return MessageResponse(message="Bookmark removed.")
