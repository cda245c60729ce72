"""Routing entities."""

from .page_records import (
    PageRouteRecord,
    PageDataRef,
    PageSlugRecord,
    parse_route_record,
    parse_slug_record,
)

__all__ = [
    "PageRouteRecord",
    "PageDataRef",
    "PageSlugRecord",
    "parse_route_record",
    "parse_slug_record",
]
