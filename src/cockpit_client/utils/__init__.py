"""Utilities module for cockpit-client."""

from .url_protocols import (
    CockpitProtocol,
    ParsedCockpitUrl,
    parse_cockpit_url,
    is_cockpit_page_url,
    is_cockpit_asset_url,
    extract_page_id,
    extract_asset_id,
)
from .query_string import build_query_string, encode_query_param
from .tenant import (
    TenantUrlResult,
    get_tenant_ids,
    resolve_api_key,
    resolve_tenant_from_subdomain,
    resolve_tenant_from_url,
)

__all__ = [
    # URL protocols
    "CockpitProtocol",
    "ParsedCockpitUrl",
    "parse_cockpit_url",
    "is_cockpit_page_url",
    "is_cockpit_asset_url",
    "extract_page_id",
    "extract_asset_id",
    # Query strings
    "build_query_string",
    "encode_query_param",
    # Tenants
    "TenantUrlResult",
    "get_tenant_ids",
    "resolve_api_key",
    "resolve_tenant_from_subdomain",
    "resolve_tenant_from_url",
]
