"""
Tests for the book URL shape check.
"""

import pytest

from bookshop.services.urls import is_https_url_with_tld


@pytest.mark.parametrize("url", [
    "https://openlibrary.org/books/OL2055137M.json",
    "https://openlibrary.org/works/OL45883W",
    "https://www.example.co.uk/path?q=1",
    "https://example.com:8443/x",
])
def test_accepts_https_urls_with_tld(url):
    assert is_https_url_with_tld(url)


@pytest.mark.parametrize("url", [
    "",
    "openlibrary.org/books/OL2055137M.json",
    "http://openlibrary.org/books/OL2055137M.json",
    "ftp://openlibrary.org/books/OL2055137M.json",
    "https://localhost/books/1",
    "https://openlibrary/books/1",
    "https://openlibrary.123/books/1",
    "https://open library.org/books/1",
    "https://-bad-.org/",
    "https://example.com:99999/",
    "https:///books/1",
])
def test_rejects_everything_else(url):
    assert not is_https_url_with_tld(url)


def test_rejects_non_strings():
    assert not is_https_url_with_tld(None)


@pytest.mark.parametrize("url", [
    "https://openlibrary.org/books/OL\x01.json",
    "https://openlibrary.org/books/OL2055137M.json\x00",
    "https://openlibrary.org/books/\x7fOL2055137M.json",
])
def test_rejects_control_characters(url):
    assert not is_https_url_with_tld(url)
