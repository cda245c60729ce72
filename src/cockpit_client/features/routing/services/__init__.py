"""Routing services."""

from .route_map import (
    generate_id_to_route_map,
    generate_slug_to_route_map,
    pages_list_url,
    ROUTE_REPLACEMENT_MAP_KEY,
    SLUG_ROUTE_MAP_KEY,
)

__all__ = [
    "generate_id_to_route_map",
    "generate_slug_to_route_map",
    "pages_list_url",
    "ROUTE_REPLACEMENT_MAP_KEY",
    "SLUG_ROUTE_MAP_KEY",
]
