"""
PageCarbon — URL Resolver
Turns asset references found in HTML into absolute http(s) URLs.
"""

from typing import Optional
from urllib.parse import urljoin, urlsplit

ALLOWED_SCHEMES = ("http", "https")


def is_http_url(url: Optional[str]) -> bool:
    """True when `url` carries an explicit http:// or https:// prefix."""
    if not url:
        return False
    return url.strip().lower().startswith(("http://", "https://"))


def resolve_url(base_url: str, reference: Optional[str]) -> Optional[str]:
    """
    Resolve `reference` against `base_url` using standard URL joining.

    Handles absolute, protocol-relative ("//cdn.example/x.js") and
    path-relative references. Returns None instead of raising when the
    reference is empty, cannot be parsed, or ends up outside http(s).
    """
    if reference is None:
        return None
    reference = reference.strip()
    if not reference:
        return None

    try:
        absolute = urljoin(base_url, reference)
        parts = urlsplit(absolute)
        # Accessing .port validates it (raises ValueError when out of range)
        parts.port
    except ValueError:
        return None

    if parts.scheme.lower() not in ALLOWED_SCHEMES or not parts.hostname:
        return None
    return absolute
