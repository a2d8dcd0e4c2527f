"""
Tests for the command-line jobs (export_books, review_statistics).
"""

import json
import uuid
from datetime import datetime, timezone

import pytest

from bookshop.jobs.export_books import build_export, export_books
from bookshop.jobs.review_statistics import highest_review_day, highest_review_month
from bookshop.jobs.review_statistics import main as review_statistics_main
from bookshop.models.book import Book
from bookshop.models.bookmark import Bookmark
from bookshop.models.enums import BookCondition, PromotionStatus
from bookshop.models.review import Review


def add_book(db, title, author=None, categories=()):
    book_id = uuid.uuid4()
    book = Book(
        id=book_id,
        book=f"https://openlibrary.org/books/{book_id.hex}.json",
        title=title,
        author=author,
        condition=BookCondition.NEW,
        promotion_status=PromotionStatus.NONE,
        is_promoted=False,
        slug=f"book-{book_id}",
        categories=list(categories),
    )
    db.add(book)
    db.commit()
    return book


def add_review(db, book, user, published_at, rating=4):
    review = Review(book=book, user=user, body="Good read", rating=rating, published_at=published_at)
    db.add(review)
    db.commit()
    return review


def at(year, month, day, hour=12):
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


# =============================================================================
# export_books
# =============================================================================

class TestExportBooks:

    def test_active_users_reviewed_and_bookmarked(self, db, reader, admin_user, categories):
        hyperion = add_book(db, "Hyperion", "Dan Simmons", categories=[categories[1]])
        add_review(db, hyperion, reader, at(2024, 3, 1))
        add_review(db, hyperion, reader, at(2024, 3, 2))
        add_review(db, hyperion, admin_user, at(2024, 3, 3))
        db.add(Bookmark(book=hyperion, user=reader))
        db.commit()

        [entry] = build_export(db)

        assert entry["id"] == str(hyperion.id)
        assert entry["title"] == "Hyperion"
        assert entry["author"] == "Dan Simmons"
        assert entry["categories"] == ["Science"]
        assert entry["reviews"] == 3
        assert entry["bookmarks"] == 1
        assert entry["active_users"] == ["reader@example.com"]

    def test_bookmark_without_review_is_not_active(self, db, reader):
        book = add_book(db, "Fantastic Mr Fox")
        db.add(Bookmark(book=book, user=reader))
        db.commit()

        [entry] = build_export(db)
        assert entry["active_users"] == []
        assert entry["author"] is None

    def test_writes_json_file(self, db, tmp_path):
        add_book(db, "Hyperion", "Dan Simmons")
        target = tmp_path / "nested" / "export"

        path = export_books(db, str(target))

        assert path == target / "books.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert [b["title"] for b in data] == ["Hyperion"]

    def test_empty_catalogue(self, db, tmp_path):
        path = export_books(db, str(tmp_path))
        assert json.loads(path.read_text(encoding="utf-8")) == []


# =============================================================================
# review_statistics
# =============================================================================

class TestReviewStatistics:

    @pytest.fixture
    def book(self, db):
        return add_book(db, "Hyperion")

    def test_no_reviews(self, db):
        assert highest_review_day(db) is None
        assert highest_review_month(db) is None

    def test_busiest_day(self, db, book, reader):
        add_review(db, book, reader, at(2024, 1, 5))
        add_review(db, book, reader, at(2024, 2, 10, 9))
        add_review(db, book, reader, at(2024, 2, 10, 18))

        assert highest_review_day(db) == "2024-02-10"

    def test_busiest_month(self, db, book, reader):
        add_review(db, book, reader, at(2024, 1, 5))
        add_review(db, book, reader, at(2024, 3, 1))
        add_review(db, book, reader, at(2024, 3, 20))
        add_review(db, book, reader, at(2024, 1, 5, 15))
        add_review(db, book, reader, at(2024, 3, 28))

        assert highest_review_month(db) == "2024-03"

    def test_tie_goes_to_earliest(self, db, book, reader):
        add_review(db, book, reader, at(2024, 6, 2))
        add_review(db, book, reader, at(2024, 6, 1))

        assert highest_review_day(db) == "2024-06-01"
        assert highest_review_month(db) == "2024-06"

    def test_main_prints_busiest_month(self, db, book, reader, session_factory, monkeypatch, capsys):
        add_review(db, book, reader, at(2024, 5, 4))
        monkeypatch.setattr("bookshop.db.session.SessionLocal", session_factory)

        assert review_statistics_main(["--month"]) == 0
        assert capsys.readouterr().out.strip() == "Most reviews in: 2024-05"
