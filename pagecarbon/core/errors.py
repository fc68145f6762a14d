"""
PageCarbon — Audit Errors
Failures that abort an audit. Asset probe failures never appear here;
they are recorded as zero-byte assets instead.
"""
from typing import Optional


class AuditError(Exception):
    """Base class for every audit-level failure."""


class InputValidationError(AuditError):
    """The page URL is missing or is not an http(s) URL."""


class PageFetchError(AuditError):
    """The page itself could not be retrieved."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")


class InternalAuditError(AuditError):
    """Unexpected failure while parsing or aggregating an audit."""
