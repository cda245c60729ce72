"""Parameter validation helpers for API call builders."""

import re
from typing import Any

from .exceptions import ValidationError


def require_param(value: Any, name: str) -> None:
    """Raise ValidationError when a required parameter is missing.
    
    Args:
        value: Parameter value to check
        name: Human readable description used in the message (e.g. "a page id")
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        raise ValidationError(f"Cockpit: Please provide {name}", details={"parameter": name})


_PATH_SEGMENT = re.compile(r"[a-zA-Z0-9_-]+")


def validate_path_segment(value: str, name: str) -> None:
    """Reject path segments that could escape the API path (e.g. ``../``).
    
    Raises:
        ValidationError: If value contains anything but letters, digits, ``-`` or ``_``
    """
    if not isinstance(value, str) or not _PATH_SEGMENT.fullmatch(value):
        raise ValidationError(
            f"Cockpit: Invalid {name} format (only alphanumeric, hyphens, and underscores allowed)",
            details={"parameter": name},
        )
