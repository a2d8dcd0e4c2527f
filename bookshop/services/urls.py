# bookshop/services/urls.py
# Book URL shape check: absolute HTTPS URL whose host ends in a TLD.
# Used by the request schema (admission) and again by the write pipeline.

import re
from urllib.parse import urlsplit

_LABEL = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)$", re.IGNORECASE)
_TLD = re.compile(r"^[a-z]{2,63}$|^xn--[a-z0-9-]{1,59}$", re.IGNORECASE)


def _is_forbidden(char: str) -> bool:
    # whitespace and ASCII control characters
    return char.isspace() or (char < "\x80" and not char.isprintable())


def is_https_url_with_tld(value: str) -> bool:
    if not isinstance(value, str) or not value or any(_is_forbidden(c) for c in value):
        return False
    try:
        parts = urlsplit(value)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    if parts.scheme.lower() != "https" or not parts.hostname:
        return False

    labels = parts.hostname.rstrip(".").split(".")
    if len(labels) < 2:
        return False
    if not all(_LABEL.match(label) for label in labels):
        return False
    return bool(_TLD.match(labels[-1]))
