"""Serialize/rewrite/parse helper shared by the string based transformers."""

import json
import logging
from typing import Any, Callable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def to_json(value: Any) -> str:
    """Serialize compactly, matching the wire form of API responses."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def json_escape(text: str) -> str:
    """Escape text for embedding inside a JSON string literal."""
    return json.dumps(text, ensure_ascii=False)[1:-1]


def rewrite_json(value: T, rewrite: Callable[[str], str], failure_message: str) -> T:
    """Apply ``rewrite`` to the serialized form of ``value`` and parse it back.
    
    Only JSON-shaped values (as produced by ``json.loads``) round-trip
    faithfully: non-string keys and tuples come back as strings and lists.
    When no rewrite applies, the original value is returned as is.
    
    On any serialization or parse failure the original value is returned
    unchanged and a warning is logged.
    """
    try:
        serialized = to_json(value)
        rewritten = rewrite(serialized)
        if rewritten == serialized:
            return value
        return json.loads(rewritten)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning(f"Cockpit: {failure_message}: {e}")
        return value
