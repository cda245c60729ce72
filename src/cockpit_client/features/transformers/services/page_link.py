"""Page link transformer for resolving ``pages://id`` references."""

import re
from typing import Mapping, Optional, Pattern, Tuple, TypeVar

from .serialization import json_escape, rewrite_json

T = TypeVar("T")


def compile_link_pattern(keys) -> Optional[Pattern[str]]:
    """Build one alternation over the regex-escaped keys, longest first.
    
    Longest-first ordering keeps ``pages://id1`` from matching inside
    ``pages://id10``.
    """
    ordered = sorted(keys, key=len, reverse=True)
    if not ordered:
        return None
    return re.compile("|".join(re.escape(key) for key in ordered))


def prepare_link_lookup(replacements: Mapping[str, Optional[str]]) -> Tuple[Optional[Pattern[str]], dict]:
    """Return the compiled pattern and the JSON-escaped key lookup."""
    lookup = {json_escape(key): value for key, value in replacements.items()}
    return compile_link_pattern(lookup.keys()), lookup


def substitute_links(json_string: str, pattern: Optional[Pattern[str]], lookup: Mapping[str, Optional[str]]) -> str:
    """Replace every key occurrence; keys mapped to None are left untouched."""
    if pattern is None:
        return json_string
    
    def _replace(match):
        value = lookup.get(match.group(0))
        return match.group(0) if value is None else json_escape(value)
    
    return pattern.sub(_replace, json_string)


def transform_page_links(json_string: str, replacements: Mapping[str, Optional[str]]) -> str:
    """Resolve page links in a JSON string.
    
    Args:
        json_string: The JSON string to transform
        replacements: Map of ``pages://id`` -> route
        
    Returns:
        Transformed JSON string with page links resolved
    """
    pattern, lookup = prepare_link_lookup(replacements)
    return substitute_links(json_string, pattern, lookup)


class PageLinkTransformer:
    """Transformer that only resolves page links.
    
    Use this when asset path fixing is not needed.
    """
    
    def __init__(self, replacements: Mapping[str, Optional[str]]):
        self.replacements = dict(replacements)
        self._pattern, self._lookup = prepare_link_lookup(self.replacements)
    
    def transform(self, value: T) -> T:
        if self._pattern is None:
            return value
        return rewrite_json(
            value,
            lambda s: substitute_links(s, self._pattern, self._lookup),
            "Failed to transform page links",
        )
