"""Routing feature: derived page route tables backed by the cache feature."""

from .entities import PageRouteRecord, PageSlugRecord, PageDataRef
from .services import (
    generate_id_to_route_map,
    generate_slug_to_route_map,
    pages_list_url,
    ROUTE_REPLACEMENT_MAP_KEY,
    SLUG_ROUTE_MAP_KEY,
)

__all__ = [
    "PageRouteRecord",
    "PageSlugRecord",
    "PageDataRef",
    "generate_id_to_route_map",
    "generate_slug_to_route_map",
    "pages_list_url",
    "ROUTE_REPLACEMENT_MAP_KEY",
    "SLUG_ROUTE_MAP_KEY",
]
