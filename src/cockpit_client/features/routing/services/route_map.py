"""Route map generation for Cockpit page link resolution.

Both generators issue at most one list request against the pages endpoint,
fold the result into a flat ``str -> str`` table and persist it through the
cache manager. Upstream failures degrade to an empty table; cache failures
propagate.

Concurrent callers that both miss the cache will both fetch and both write
the table (last write wins). The tables are equivalent, so no request
deduplication is attempted.
"""

import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from urllib.parse import urlsplit

import httpx

from ..entities.page_records import parse_route_record, parse_slug_record
from ...cache.entities.protocols import CacheManagerProtocol

logger = logging.getLogger(__name__)

ROUTE_REPLACEMENT_MAP_KEY = "ROUTE_REPLACEMENT_MAP"
SLUG_ROUTE_MAP_KEY = "SLUG_ROUTE_MAP"

_ID_MAP_FIELDS = {"_id": 1, "slug": 1, "_r": 1}
_SLUG_MAP_FIELDS = {"data": {"collection": 1, "singleton": 1}, "_r": 1, "type": 1}
_SLUG_MAP_FILTER = {"data.collection": {"$ne": None}}


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def pages_list_url(endpoint: str, tenant: Optional[str] = None) -> str:
    """Build ``{origin}{/:tenant}/api/pages/pages`` for an endpoint URL."""
    parts = urlsplit(endpoint)
    api_path = f"/:{tenant}/api" if tenant else "/api"
    return f"{parts.scheme}://{parts.netloc}{api_path}/pages/pages"


def _cache_key(name: str, tenant: Optional[str]) -> str:
    return f"{name}:{tenant or 'default'}"


def _fold_id_routes(pages: list) -> Dict[str, str]:
    replacements: Dict[str, str] = {}
    for item in pages:
        record = parse_route_record(item)
        # pages without a route would resolve to nothing; keep the link as-is
        if record is None or record.route is None:
            continue
        replacements[record.link_key] = record.route
    return replacements


def _fold_slug_routes(pages: list) -> Dict[str, str]:
    slug_map: Dict[str, str] = {}
    for item in pages:
        record = parse_slug_record(item)
        if record is None or record.route is None:
            continue
        entity_name = record.entity_name
        if entity_name is None:
            continue
        slug_map[entity_name] = record.route
    return slug_map


async def _fetch_pages(
    client: httpx.AsyncClient,
    endpoint: str,
    tenant: Optional[str],
    params: Mapping[str, str],
    label: str,
) -> Tuple[bool, list]:
    """Run the list request. Returns (ok, pages); never raises for transport errors.
    
    URL building happens inside the guarded block so a malformed endpoint
    degrades the same way as an unreachable one.
    """
    try:
        url = pages_list_url(endpoint, tenant)
        response = await client.get(url, params=params)
        if not response.is_success:
            logger.warning(f"Cockpit: Failed to fetch {label} (status {response.status_code})")
            return False, []
        body = response.json()
    except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError) as e:
        logger.warning(f"Cockpit: Failed to fetch {label}: {e}")
        return False, []
    
    return True, body if isinstance(body, list) else []


async def _generate_map(
    endpoint: str,
    tenant: Optional[str],
    cache: Optional[CacheManagerProtocol],
    http_client: Optional[httpx.AsyncClient],
    cache_name: str,
    params: Mapping[str, str],
    fold: Callable[[list], Dict[str, str]],
    label: str,
) -> Dict[str, str]:
    cache_key = _cache_key(cache_name, tenant)
    
    if cache is not None:
        cached = await cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Using cached {label} for {cache_key}")
            return cached
    
    if http_client is not None:
        ok, pages = await _fetch_pages(http_client, endpoint, tenant, params, label)
    else:
        async with httpx.AsyncClient() as client:
            ok, pages = await _fetch_pages(client, endpoint, tenant, params, label)
    
    if not ok:
        return {}
    
    result = fold(pages)
    if cache is not None:
        await cache.set(cache_key, result)
    return result


async def generate_id_to_route_map(
    endpoint: str,
    tenant: Optional[str] = None,
    cache: Optional[CacheManagerProtocol] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, str]:
    """Generate the ``pages://<id> -> route`` replacement table.
    
    Args:
        endpoint: Any URL on the Cockpit host (only its origin is used)
        tenant: Optional tenant name
        cache: Optional cache manager; a cached table is returned verbatim
        http_client: Optional transport; a short-lived client is used otherwise
        
    Returns:
        Replacement table, empty when the pages could not be fetched
    """
    return await _generate_map(
        endpoint,
        tenant,
        cache,
        http_client,
        cache_name=ROUTE_REPLACEMENT_MAP_KEY,
        params={"fields": _compact_json(_ID_MAP_FIELDS)},
        fold=_fold_id_routes,
        label="route replacements",
    )


async def generate_slug_to_route_map(
    endpoint: str,
    tenant: Optional[str] = None,
    cache: Optional[CacheManagerProtocol] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, str]:
    """Generate the collection/singleton name -> route table.
    
    Only pages with a non-null ``data.collection`` are requested. The entity
    name is ``data.collection`` when present, otherwise ``data.singleton``.
    """
    return await _generate_map(
        endpoint,
        tenant,
        cache,
        http_client,
        cache_name=SLUG_ROUTE_MAP_KEY,
        params={
            "locale": "default",
            "fields": _compact_json(_SLUG_MAP_FIELDS),
            "filter": _compact_json(_SLUG_MAP_FILTER),
        },
        fold=_fold_slug_routes,
        label="slug route map",
    )
