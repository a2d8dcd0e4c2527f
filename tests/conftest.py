"""
Pytest configuration and fixtures for the Bookshop API tests.

The application runs against an in-memory SQLite database and a fake
Open Library served through httpx.MockTransport.
"""

import os

# Settings are read at import time -- configure before importing bookshop
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("APP_ENV", "test")

from typing import Any, Dict, Generator, List, Tuple  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import bookshop.db.base  # noqa: E402, F401
from bookshop.core.security import create_access_token  # noqa: E402
from bookshop.db.base_class import Base  # noqa: E402
from bookshop.db.session import get_db  # noqa: E402
from bookshop.main import app  # noqa: E402
from bookshop.models.category import Category  # noqa: E402
from bookshop.models.enums import UserRole  # noqa: E402
from bookshop.models.user import User  # noqa: E402
from bookshop.services.openlibrary import OpenLibraryClient, get_openlibrary_client  # noqa: E402


HYPERION_URL = "https://openlibrary.org/books/OL2055137M.json"
HYPERION_AUTHOR_URL = "https://openlibrary.org/authors/OL19981A"
HYPERION = {"title": "Hyperion", "authors": [{"key": "/authors/OL19981A"}]}
DAN_SIMMONS = {"name": "Dan Simmons"}


# =============================================================================
# Fake Open Library
# =============================================================================

class FakeOpenLibrary:
    """
    Routes URLs to canned responses.

    routes[url] = (status_code, body)   body: dict/list -> JSON, str -> raw text
    unreachable = {url, ...}            raise httpx.ConnectError for these
    """

    def __init__(self):
        self.routes: Dict[str, Tuple[int, Any]] = {}
        self.unreachable = set()
        self.requests: List[httpx.Request] = []

    def add(self, url: str, body: Any, status_code: int = 200) -> None:
        self.routes[url] = (status_code, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if url not in self.routes:
            return httpx.Response(404, json={"error": "notfound"})
        status_code, body = self.routes[url]
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)

    def client(self) -> OpenLibraryClient:
        http_client = httpx.Client(transport=httpx.MockTransport(self.handler))
        return OpenLibraryClient(http_client=http_client, base_url="https://openlibrary.org")

    @property
    def requested_urls(self) -> List[str]:
        return [str(r.url) for r in self.requests]


@pytest.fixture
def openlibrary() -> FakeOpenLibrary:
    fake = FakeOpenLibrary()
    fake.add(HYPERION_URL, HYPERION)
    fake.add(HYPERION_AUTHOR_URL, DAN_SIMMONS)
    return fake


# =============================================================================
# Database
# =============================================================================

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# Users & auth
# =============================================================================

@pytest.fixture
def admin_user(db) -> User:
    user = User(email="admin@example.com", first_name="Shop", last_name="Admin", role=UserRole.ADMIN)
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def reader(db) -> User:
    user = User(email="reader@example.com", first_name="Jane", last_name="Reader", role=UserRole.USER)
    db.add(user)
    db.commit()
    return user


def auth_headers(user: User) -> Dict[str, str]:
    token = create_access_token(user.id, user.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_user) -> Dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture
def reader_headers(reader) -> Dict[str, str]:
    return auth_headers(reader)


@pytest.fixture
def categories(db) -> List[Category]:
    items = [Category(name=name) for name in ("News", "Science", "History")]
    db.add_all(items)
    db.commit()
    return items


# =============================================================================
# HTTP client
# =============================================================================

@pytest.fixture
def client(session_factory, openlibrary) -> Generator[TestClient, None, None]:
    def override_get_db():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def override_get_openlibrary_client():
        with openlibrary.client() as ol_client:
            yield ol_client

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_openlibrary_client] = override_get_openlibrary_client
    yield TestClient(app)
    app.dependency_overrides.clear()
