"""Query string encoding utilities."""

import json
from typing import Any, Mapping, Optional
from urllib.parse import quote


def encode_query_param(key: str, value: Any) -> str:
    """Encode a single key/value pair; non-strings are JSON encoded."""
    encoded_value = value if isinstance(value, str) else json.dumps(value, separators=(",", ":"))
    return f"{quote(key, safe='')}={quote(encoded_value, safe='')}"


def build_query_string(params: Mapping[str, Any]) -> Optional[str]:
    """Build a query string from params, skipping None values.
    
    Returns:
        Encoded query string, or None when no parameter remains
    """
    entries = [(key, value) for key, value in params.items() if value is not None]
    if not entries:
        return None
    return "&".join(encode_query_param(key, value) for key, value in entries)
