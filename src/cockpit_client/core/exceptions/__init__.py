"""Exception hierarchy for cockpit-client."""

from .base import (
    CockpitError,
    ConfigurationError,
    ValidationError,
    create_error_response,
)
from .infrastructure import (
    CacheError,
    CacheValueError,
    CockpitHTTPError,
)

__all__ = [
    "CockpitError",
    "ConfigurationError",
    "ValidationError",
    "CacheError",
    "CacheValueError",
    "CockpitHTTPError",
    "create_error_response",
]
