# bookshop/services/openlibrary.py
# Open Library metadata client used by the book write pipeline.
#
# Usage:
#   with OpenLibraryClient() as client:
#       doc = client.fetch_json("https://openlibrary.org/books/OL2055137M.json")
#       author = client.fetch_json(client.author_url("/authors/OL19981A"))
#
# One GET per call, Accept: application/json, bounded timeout.
# No retries and no caching: the caller decides what a failure means.

import json
import logging
from typing import Any, Dict, Generator, Optional

import httpx

from bookshop.core.config import settings
from bookshop.services.errors import DecodeError, HttpStatusError, Unreachable

logger = logging.getLogger("bookshop.openlibrary")


class OpenLibraryClient:
    """Thin JSON-over-HTTP client for openlibrary.org documents."""

    def __init__(
        self,
        http_client: Optional[httpx.Client] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.openlibrary_base_url).rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=timeout if timeout is not None else settings.openlibrary_timeout_seconds,
            headers={"User-Agent": settings.openlibrary_user_agent},
            follow_redirects=True,
        )

    def __enter__(self) -> "OpenLibraryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def author_url(self, key: str) -> str:
        """Absolute URL of an author record from its key, e.g. "/authors/OL19981A"."""
        return f"{self.base_url}{key}"

    def fetch_json(self, url: str) -> Dict[str, Any]:
        """
        GET url and decode the body as a JSON object.

        Raises:
            Unreachable     -- transport error, timeout or unusable URL
            HttpStatusError -- non-2xx response
            DecodeError     -- body is not valid JSON, or not an object
        """
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url, headers={"Accept": "application/json"})
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Open Library unreachable: %s (%s)", url, exc)
            raise Unreachable(url, f"Request failed: {exc}") from exc

        if not response.is_success:
            logger.warning("Open Library returned %s for %s", response.status_code, url)
            raise HttpStatusError(url, response.status_code)

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(url, "Response body is not valid JSON") from exc
        if not isinstance(data, dict):
            raise DecodeError(url, "Expected a JSON object")
        return data


# ── FastAPI Dependency ────────────────────────────────────────────────────────
def get_openlibrary_client() -> Generator[OpenLibraryClient, None, None]:
    """One client per request; the underlying connection pool is closed after."""
    with OpenLibraryClient() as client:
        yield client
