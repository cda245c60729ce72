"""Infrastructure exceptions for cockpit-client (cache and HTTP transport)."""

from typing import Optional

from .base import CockpitError


# Cache Errors
class CacheError(CockpitError):
    """Base class for cache-related errors."""
    pass


class CacheValueError(CacheError):
    """Raised when a value cannot be stored (e.g. ``None``)."""
    pass


# HTTP Errors
class CockpitHTTPError(CockpitError):
    """Raised when the Cockpit API answers with a non-success status."""
    
    def __init__(self, url: str, status_code: int, body: Optional[str] = None):
        super().__init__(
            f"Cockpit: Error accessing {url} ({status_code}): {body or ''}",
            details={"url": url, "status_code": status_code, "body": body},
        )
        self.url = url
        self.status_code = status_code
        self.body = body
