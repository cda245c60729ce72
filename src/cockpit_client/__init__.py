"""cockpit-client - typed async client for the Cockpit headless CMS.

Provides tenant-isolated caching, page route tables and response rewriting
(asset storage paths and ``pages://`` link resolution).
"""

from .__version__ import __version__

from .client import CockpitClient, ImageMimeType, ImageSizeMode, create_client

from .config import (
    CockpitSettings,
    CockpitOptions,
    CockpitConfig,
    create_config,
    setup_logging,
)

from .core.exceptions import (
    CockpitError,
    ConfigurationError,
    ValidationError,
    CacheError,
    CacheValueError,
    CockpitHTTPError,
)

from .features.cache import (
    CacheStore,
    CacheManager,
    MemoryCacheStore,
    NoopCacheStore,
    RedisCacheStore,
    create_cache_manager,
)

from .features.routing import (
    generate_id_to_route_map,
    generate_slug_to_route_map,
)

from .features.transformers import (
    ResponseTransformer,
    identity_transformer,
    AssetPathTransformer,
    PageLinkTransformer,
    ImagePathTransformer,
    compose_transformers,
)

from .utils import (
    CockpitProtocol,
    ParsedCockpitUrl,
    parse_cockpit_url,
    is_cockpit_page_url,
    is_cockpit_asset_url,
    extract_page_id,
    extract_asset_id,
    resolve_tenant_from_url,
    resolve_tenant_from_subdomain,
)

__all__ = [
    "__version__",
    # Client
    "CockpitClient",
    "create_client",
    "ImageSizeMode",
    "ImageMimeType",
    # Configuration
    "CockpitSettings",
    "CockpitOptions",
    "CockpitConfig",
    "create_config",
    "setup_logging",
    # Exceptions
    "CockpitError",
    "ConfigurationError",
    "ValidationError",
    "CacheError",
    "CacheValueError",
    "CockpitHTTPError",
    # Cache
    "CacheStore",
    "CacheManager",
    "MemoryCacheStore",
    "NoopCacheStore",
    "RedisCacheStore",
    "create_cache_manager",
    # Routing
    "generate_id_to_route_map",
    "generate_slug_to_route_map",
    # Transformers
    "ResponseTransformer",
    "identity_transformer",
    "AssetPathTransformer",
    "PageLinkTransformer",
    "ImagePathTransformer",
    "compose_transformers",
    # URL utilities
    "CockpitProtocol",
    "ParsedCockpitUrl",
    "parse_cockpit_url",
    "is_cockpit_page_url",
    "is_cockpit_asset_url",
    "extract_page_id",
    "extract_asset_id",
    "resolve_tenant_from_url",
    "resolve_tenant_from_subdomain",
]
