"""URL protocol parsing utilities for Cockpit CMS.

Cockpit references content with two symbolic schemes:
- ``pages://id`` - references to pages by ID
- ``assets://id`` - references to assets by ID

Anything else is classified as an external URL.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class CockpitProtocol(str, Enum):
    """Link classification."""
    PAGES = "pages"
    ASSETS = "assets"
    EXTERNAL = "external"


@dataclass(frozen=True)
class ParsedCockpitUrl:
    """Parsed link: protocol, extracted id and the trimmed original."""
    protocol: CockpitProtocol
    id: str
    original: str


_SCHEMES = (
    (CockpitProtocol.PAGES, "pages://"),
    (CockpitProtocol.ASSETS, "assets://"),
)


def parse_cockpit_url(url: Any) -> Optional[ParsedCockpitUrl]:
    """Parse a Cockpit URL and extract protocol and ID information.
    
    Args:
        url: The URL to parse (e.g. "pages://123", "assets://456" or "https://example.com")
        
    Returns:
        ParsedCockpitUrl, or None for None, non-string, empty or whitespace input
        
    Example:
        >>> parse_cockpit_url("pages://abc123?x=1")
        ParsedCockpitUrl(protocol=<CockpitProtocol.PAGES: 'pages'>, id='abc123', original='pages://abc123?x=1')
    """
    if not isinstance(url, str):
        return None
    
    trimmed = url.strip()
    if not trimmed:
        return None
    
    for protocol, scheme in _SCHEMES:
        if trimmed.startswith(scheme):
            identifier = trimmed[len(scheme):].split("?", 1)[0]
            return ParsedCockpitUrl(protocol=protocol, id=identifier, original=trimmed)
    
    return ParsedCockpitUrl(protocol=CockpitProtocol.EXTERNAL, id=trimmed, original=trimmed)


def is_cockpit_page_url(url: Any) -> bool:
    """Check if a URL is a Cockpit page reference (``pages://id``)."""
    parsed = parse_cockpit_url(url)
    return parsed is not None and parsed.protocol is CockpitProtocol.PAGES


def is_cockpit_asset_url(url: Any) -> bool:
    """Check if a URL is a Cockpit asset reference (``assets://id``)."""
    parsed = parse_cockpit_url(url)
    return parsed is not None and parsed.protocol is CockpitProtocol.ASSETS


def extract_page_id(url: Any) -> Optional[str]:
    """Extract the page ID from a ``pages://`` URL, None otherwise."""
    parsed = parse_cockpit_url(url)
    return parsed.id if parsed is not None and parsed.protocol is CockpitProtocol.PAGES else None


def extract_asset_id(url: Any) -> Optional[str]:
    """Extract the asset ID from an ``assets://`` URL, None otherwise."""
    parsed = parse_cockpit_url(url)
    return parsed.id if parsed is not None and parsed.protocol is CockpitProtocol.ASSETS else None
