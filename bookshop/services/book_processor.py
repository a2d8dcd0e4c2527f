# bookshop/services/book_processor.py
# Write pipeline for Book create/update.
#
#   1. validate   -- book URL shape, category ids          (BookValidationError)
#   2. fetch book -- Open Library document, title required (MetadataUnavailable,
#                                                            MalformedMetadata)
#   3. fetch author (best effort) -- any failure leaves author = None
#   4. map        -- title, author, condition, categories, promotion, slug
#   5. persist    -- PersistProcessor; unique violations become Conflict
#
# Nothing is added to the session before step 5, so a failed fetch can
# never leave a partial write behind.

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookshop.models.book import Book
from bookshop.models.category import Category
from bookshop.models.enums import PromotionStatus
from bookshop.schemas.book import BookWriteRequest
from bookshop.services.errors import (
    BookValidationError,
    Conflict,
    FetchError,
    MalformedMetadata,
    MetadataUnavailable,
)
from bookshop.services.openlibrary import OpenLibraryClient
from bookshop.services.persistence import PersistProcessor, is_unique_violation
from bookshop.services.promotion import derive_slug, resolve_promotion
from bookshop.services.urls import is_https_url_with_tld

logger = logging.getLogger("bookshop.book_processor")


def extract_author_key(document: Dict[str, Any]) -> Optional[str]:
    """
    Key of the first listed author, if any.

    Edition records list {"key": "/authors/..."}; work records nest it as
    {"author": {"key": "/authors/..."}}.
    """
    authors = document.get("authors")
    if not isinstance(authors, list) or not authors:
        return None
    first = authors[0]
    if not isinstance(first, dict):
        return None
    key = first.get("key")
    if key is None and isinstance(first.get("author"), dict):
        key = first["author"].get("key")
    if isinstance(key, str) and key.startswith("/"):
        return key
    return None


class BookPersistProcessor:
    """Enriches a book from Open Library, then hands it to the persistence delegate."""

    def __init__(
        self,
        db: Session,
        client: OpenLibraryClient,
        persist: Optional[PersistProcessor] = None,
    ):
        self.db = db
        self.client = client
        self.persist = persist or PersistProcessor(db)

    # ── Public ────────────────────────────────────────────────────────────────

    def process(self, request: BookWriteRequest, book: Optional[Book] = None) -> Book:
        """
        Create (book=None) or update (book=existing row) from a write request.
        Returns the stored entity as given back by the persistence delegate.
        """
        categories = self._validate(request)

        document = self._fetch_book_document(request.book)
        title = document["title"]
        author = self._fetch_author_name(document)

        is_new = book is None
        if is_new:
            book = Book()

        book.book = request.book
        book.title = title
        book.author = author
        book.condition = request.condition
        if categories is not None:
            book.categories = categories

        book.promotion_status, book.is_promoted = resolve_promotion(
            request.is_promoted,
            request.promotion_status,
            current=None if is_new else book.promotion_status,
        )

        if request.slug:
            book.slug = request.slug
        elif is_new:
            book.slug = derive_slug(self.persist.allocate_id(book))

        stored = self._persist(book)
        logger.info(
            "%s book id=%s title=%r author=%r",
            "Created" if is_new else "Updated", stored.id, stored.title, stored.author,
        )
        return stored

    def change_promotion(self, book: Book, promotion_status: PromotionStatus) -> Book:
        """
        Set the promotion tier directly (the only way to reach Pro).
        No metadata is re-fetched.
        """
        book.promotion_status, book.is_promoted = resolve_promotion(None, promotion_status)
        stored = self._persist(book)
        logger.info("Book id=%s promotion_status=%s", stored.id, stored.promotion_status.value)
        return stored

    # ── Steps ─────────────────────────────────────────────────────────────────

    def _validate(self, request: BookWriteRequest) -> Optional[List[Category]]:
        if not is_https_url_with_tld(request.book):
            raise BookValidationError(
                "Invalid book URL.",
                detail=f"'{request.book}' is not an HTTPS URL with a top-level domain.",
            )
        if request.categories is None:
            return None

        wanted = set(request.categories)
        found = self.db.query(Category).filter(Category.id.in_(sorted(wanted))).all() if wanted else []
        missing = wanted - {c.id for c in found}
        if missing:
            raise BookValidationError(
                "Unknown category.",
                detail=f"No category with id {', '.join(str(i) for i in sorted(missing))}.",
            )
        return sorted(found, key=lambda c: c.id)

    def _fetch_book_document(self, url: str) -> Dict[str, Any]:
        try:
            document = self.client.fetch_json(url)
        except FetchError as exc:
            raise MetadataUnavailable("Book metadata unavailable.", detail=str(exc)) from exc

        title = document.get("title")
        if not isinstance(title, str) or not title.strip():
            raise MalformedMetadata(
                "Book metadata has no title.",
                detail=f"The document at {url} does not contain a 'title'.",
            )
        return document

    def _fetch_author_name(self, document: Dict[str, Any]) -> Optional[str]:
        key = extract_author_key(document)
        if key is None:
            return None
        try:
            author = self.client.fetch_json(self.client.author_url(key))
        except FetchError as exc:
            logger.warning("Author lookup failed, storing book without author: %s", exc)
            return None

        name = author.get("name")
        if isinstance(name, str) and name.strip():
            return name
        return None

    def _persist(self, book: Book) -> Book:
        try:
            return self.persist.process(book)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise Conflict(
                    "Book already exists.",
                    detail="Another book already uses this URL or slug.",
                ) from exc
            raise
