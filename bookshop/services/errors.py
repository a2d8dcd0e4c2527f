# bookshop/services/errors.py
# Error taxonomy for the book write path.
#
# FetchError family  -- raised by the Open Library client (transport level)
# PipelineError family -- raised by BookPersistProcessor, mapped to HTTP
#                         status codes in bookshop/main.py

from typing import Optional


# ── Remote fetch ──────────────────────────────────────────────────────────────

class FetchError(Exception):
    """A metadata document could not be obtained."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"{message} ({url})")


class Unreachable(FetchError):
    """Network/transport failure or timeout."""


class HttpStatusError(FetchError):
    """The remote service answered with a non-2xx status."""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"HTTP {status_code}")


class DecodeError(FetchError):
    """The response body is not a JSON object."""


# ── Pipeline ──────────────────────────────────────────────────────────────────

class PipelineError(Exception):
    """Base class for book write-path failures."""
    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class BookValidationError(PipelineError):
    """Malformed book URL or other request-shape violation."""
    status_code = 422


class MetadataUnavailable(PipelineError):
    """The primary (title) fetch failed."""
    status_code = 502


class MalformedMetadata(PipelineError):
    """The primary fetch succeeded but carried no usable title."""
    status_code = 502


class Conflict(PipelineError):
    """Storage-level uniqueness violation on book URL or slug."""
    status_code = 409
