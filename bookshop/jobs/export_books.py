# bookshop/jobs/export_books.py
# Export every book to <directory>/books.json
#
# Usage:
#   python -m bookshop.jobs.export_books                        # EXPORT_DIRECTORY (var/export)
#   python -m bookshop.jobs.export_books --directory /tmp/out
#
# Each entry: id, author, title, category names, review and bookmark counts,
# and "active_users" -- emails of users who both reviewed and bookmarked it.

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from sqlalchemy.orm import Session, selectinload

import bookshop.db.base  # noqa: F401
from bookshop.core.config import settings
from bookshop.core.logging import setup_logging
from bookshop.models.book import Book
from bookshop.models.bookmark import Bookmark
from bookshop.models.review import Review

log = logging.getLogger("bookshop.jobs.export_books")

EXPORT_FILENAME = "books.json"


def active_users(book: Book) -> List[str]:
    """Unique emails of reviewers who also bookmarked the book, in review order."""
    bookmarked = {b.user_id for b in book.bookmarks}
    emails: List[str] = []
    for review in book.reviews:
        if review.user_id in bookmarked and review.user.email not in emails:
            emails.append(review.user.email)
    return emails


def build_export(db: Session) -> List[Dict]:
    books = (
        db.query(Book)
        .options(
            selectinload(Book.categories),
            selectinload(Book.reviews).selectinload(Review.user),
            selectinload(Book.bookmarks).selectinload(Bookmark.user),
        )
        .order_by(Book.created_at, Book.id)
        .all()
    )
    return [
        {
            "id": str(book.id),
            "author": book.author,
            "title": book.title,
            "categories": [c.name for c in book.categories],
            "reviews": len(book.reviews),
            "bookmarks": len(book.bookmarks),
            "active_users": active_users(book),
        }
        for book in books
    ]


def export_books(db: Session, directory: str) -> Path:
    """Write the export file, creating the directory if needed. Returns its path."""
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / EXPORT_FILENAME
    data = build_export(db)
    path.write_text(json.dumps(data, indent=4, ensure_ascii=False), encoding="utf-8")
    log.info(f"Exported {len(data)} books")
    return path


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Export books to a JSON file")
    parser.add_argument(
        "--directory",
        default=settings.export_directory,
        help=f"Directory to save the file (default: {settings.export_directory})",
    )
    args = parser.parse_args(argv)

    setup_logging()
    from bookshop.db.session import SessionLocal

    db = SessionLocal()
    try:
        path = export_books(db, args.directory)
    finally:
        db.close()

    print(f"Books exported successfully to: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
