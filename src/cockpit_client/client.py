"""Cockpit API client factory.

Wires configuration, the prefixed cache, route preloading, the response
transformer, URL building and the HTTP transport into one client.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx

from .config.settings import CockpitConfig, CockpitOptions, CockpitSettings, create_config
from .core.exceptions import ValidationError
from .core.validation import require_param, validate_path_segment
from .features.cache import CacheManager, CacheStore, create_cache_manager
from .features.http import HttpClient, UrlBuilder
from .features.routing import generate_id_to_route_map, generate_slug_to_route_map
from .features.transformers import ImagePathTransformer, ResponseTransformer

logger = logging.getLogger(__name__)


class ImageSizeMode(str, Enum):
    """Resize modes of the Cockpit image endpoint (``m``)."""
    THUMBNAIL = "thumbnail"
    BEST_FIT = "bestFit"
    RESIZE = "resize"
    FIT_TO_WIDTH = "fitToWidth"
    FIT_TO_HEIGHT = "fitToHeight"


class ImageMimeType(str, Enum):
    """Output formats of the Cockpit image endpoint (``mime``)."""
    AUTO = "auto"
    GIF = "gif"
    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"
    BMP = "bmp"


class CockpitClient:
    """Async client for the Cockpit CMS content, pages, assets and addon APIs.
    
    Use ``await CockpitClient.create(options)`` to build a client; it may
    preload the route replacement table before the first request.
    """
    
    def __init__(
        self,
        config: CockpitConfig,
        cache: CacheManager,
        transformer: ResponseTransformer,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self.cache = cache
        self.transformer = transformer
        self.url = UrlBuilder(config)
        self.http = HttpClient(config, transformer, client=http_client)
    
    @classmethod
    async def create(
        cls,
        options: Optional[CockpitOptions] = None,
        settings: Optional[CockpitSettings] = None,
        cache_store: Optional[CacheStore] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "CockpitClient":
        """Create a Cockpit API client.
        
        Args:
            options: Explicit options (fall back to ``COCKPIT_*`` settings)
            settings: Environment settings override
            cache_store: Custom store shared across clients (default: memory store)
                (ignored when ``options.cache_enabled`` is False)
            http_client: Shared httpx client, also used for route preloading
            
        Returns:
            Ready to use client
        """
        options = options or CockpitOptions()
        config = create_config(options, settings)
        cache = create_cache_manager(
            config.cache_prefix,
            max_entries=config.cache_max,
            ttl_ms=config.cache_ttl_ms,
            store=cache_store,
            enabled=options.cache_enabled,
        )
        
        replacements: Dict[str, str] = {}
        if options.preload_routes:
            replacements = await generate_id_to_route_map(
                config.endpoint, config.tenant, cache, http_client=http_client
            )
        
        base_url = UrlBuilder(config).origin
        transformer = ImagePathTransformer(base_url, replacements, tenant=config.tenant)
        return cls(config, cache, transformer, http_client=http_client)
    
    async def __aenter__(self) -> "CockpitClient":
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
    
    async def aclose(self) -> None:
        await self.http.aclose()
    
    # Pages API
    
    async def pages(
        self,
        locale: str = "default",
        limit: Optional[int] = None,
        skip: Optional[int] = None,
        sort: Optional[Dict[str, int]] = None,
        filter: Optional[Dict[str, Any]] = None,
        fields: Optional[Dict[str, int]] = None,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Get pages list, normalized to ``{"data": [...], "meta"?: {...}}``.
        
        The pages endpoint returns a raw array, so ``meta`` is usually absent.
        """
        url = self.url.build(
            "/pages/pages",
            locale=locale,
            query_params={
                **(query_params or {}),
                "limit": limit,
                "skip": skip,
                "sort": sort,
                "filter": filter,
                "fields": fields,
            },
        )
        result = await self.http.fetch(url)
        if result is None:
            return None
        if isinstance(result, list):
            return {"data": result}
        return result
    
    async def page_by_id(self, page_id: str, locale: str = "default", populate: Optional[int] = None) -> Optional[Any]:
        """Get a single page by id."""
        require_param(page_id, "a page id")
        url = self.url.build(f"/pages/page/{page_id}", locale=locale, query_params={"populate": populate})
        return await self.http.fetch(url)
    
    async def page_by_route(
        self,
        route: str,
        locale: str = "default",
        populate: Optional[int] = None,
        fallback_to_default: bool = False,
    ) -> Optional[Any]:
        """Get a page by route.
        
        When ``fallback_to_default`` is set and the page is missing in
        ``locale``, the page is looked up in the default locale and then
        fetched by id in the requested locale.
        """
        # populate defaults to 0 to keep route strings intact
        query_params = {"route": route, "populate": populate if populate is not None else 0}
        result = await self.http.fetch(self.url.build("/pages/page", locale=locale, query_params=query_params))
        if result:
            return result
        
        if fallback_to_default and locale != "default":
            default_result = await self.http.fetch(
                self.url.build("/pages/page", locale="default", query_params=query_params)
            )
            page_id = default_result.get("_id") if isinstance(default_result, dict) else None
            if page_id:
                return await self.page_by_id(page_id, locale=locale, populate=query_params["populate"])
        
        return None
    
    # Routes, sitemap and settings
    
    async def pages_routes(self, locale: str = "default") -> Optional[Any]:
        return await self.http.fetch(self.url.build("/pages/routes", locale=locale))
    
    async def pages_sitemap(self) -> Optional[List[Any]]:
        return await self.http.fetch(self.url.build("/pages/sitemap"))
    
    async def pages_setting(self, locale: str = "default") -> Optional[Any]:
        return await self.http.fetch(self.url.build("/pages/settings", locale=locale))
    
    async def get_full_route_for_slug(self, slug: str) -> Optional[str]:
        """Resolve a collection or singleton name to the route of its page."""
        route_map = await generate_slug_to_route_map(
            self.config.endpoint, self.config.tenant, self.cache, http_client=self.http.client
        )
        return route_map.get(slug)
    
    # Content API
    
    async def get_content_item(
        self,
        model: str,
        item_id: Optional[str] = None,
        locale: str = "default",
        use_admin_access: Optional[bool] = None,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Optional[Any]:
        """Get a single content item, or a singleton when ``item_id`` is omitted."""
        require_param(model, "a model")
        validate_path_segment(model, "model")
        path = f"/content/item/{model}"
        if item_id is not None:
            validate_path_segment(item_id, "id")
            path = f"{path}/{item_id}"
        url = self.url.build(path, locale=locale, query_params=query_params)
        return await self.http.fetch(url, use_admin_access=use_admin_access)
    
    async def get_content_items(
        self,
        model: str,
        locale: str = "default",
        limit: Optional[int] = None,
        skip: Optional[int] = None,
        sort: Optional[Dict[str, int]] = None,
        filter: Optional[Dict[str, Any]] = None,
        fields: Optional[Dict[str, int]] = None,
        populate: Optional[int] = None,
        use_admin_access: Optional[bool] = None,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Optional[Any]:
        """Get the items of a collection model."""
        require_param(model, "a model")
        validate_path_segment(model, "model")
        url = self.url.build(
            f"/content/items/{model}",
            locale=locale,
            query_params={
                **(query_params or {}),
                "limit": limit,
                "skip": skip,
                "sort": sort,
                "filter": filter,
                "fields": fields,
                "populate": populate,
            },
        )
        return await self.http.fetch(url, use_admin_access=use_admin_access)
    
    async def get_content_tree(
        self,
        model: str,
        locale: str = "default",
        parent: Optional[str] = None,
        filter: Optional[Dict[str, Any]] = None,
        fields: Optional[Dict[str, int]] = None,
        populate: Optional[int] = None,
        use_admin_access: Optional[bool] = None,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Optional[List[Any]]:
        """Get the items of a tree model as nested nodes."""
        require_param(model, "a model")
        validate_path_segment(model, "model")
        url = self.url.build(
            f"/content/tree/{model}",
            locale=locale,
            query_params={
                **(query_params or {}),
                "parent": parent,
                "filter": filter if filter is not None else {},
                "fields": fields,
                "populate": populate,
            },
        )
        return await self.http.fetch(url, use_admin_access=use_admin_access)
    
    async def get_aggregate_model(
        self,
        model: str,
        pipeline: List[Dict[str, Any]],
        locale: str = "default",
    ) -> Optional[List[Any]]:
        """Run an aggregation pipeline against a model."""
        require_param(model, "a model")
        validate_path_segment(model, "model")
        url = self.url.build(f"/content/aggregate/{model}", locale=locale, query_params={"pipeline": pipeline})
        return await self.http.fetch(url)
    
    async def post_content_item(self, model: str, item: Dict[str, Any]) -> Optional[Any]:
        """Create or update a content item."""
        require_param(model, "a model")
        validate_path_segment(model, "model")
        return await self.http.post(self.url.build(f"/content/item/{model}"), {"data": item})
    
    async def delete_content_item(self, model: str, item_id: str) -> Optional[Any]:
        require_param(model, "a model")
        require_param(item_id, "an id")
        validate_path_segment(model, "model")
        validate_path_segment(item_id, "id")
        return await self.http.delete(self.url.build(f"/content/item/{model}/{item_id}"))
    
    # Menus
    
    async def pages_menus(self, locale: str = "default", inactive: Optional[bool] = None) -> Optional[List[Any]]:
        return await self.http.fetch(self.url.build("/pages/menus", locale=locale, query_params={"inactive": inactive}))
    
    async def pages_menu(self, name: str, locale: str = "default", inactive: Optional[bool] = None) -> Optional[Any]:
        require_param(name, "a menu name")
        validate_path_segment(name, "menu name")
        url = self.url.build(f"/pages/menu/{name}", locale=locale, query_params={"inactive": inactive})
        return await self.http.fetch(url)
    
    # Assets
    
    async def asset_by_id(self, asset_id: str) -> Optional[Any]:
        require_param(asset_id, "assetId")
        return await self.http.fetch(self.url.build(f"/assets/{asset_id}"))
    
    async def image_asset_by_id(self, asset_id: str, **image_params: Any) -> Optional[str]:
        """Get the URL of a generated image variant.
        
        Args:
            asset_id: Asset id
            **image_params: Cockpit image options (``w``, ``h``, ``m``, ``q``,
                ``mime``, ``re``, ``t``, ``o``). At least ``w`` or ``h`` is required.
                
        Returns:
            URL of the generated image, or None if the asset does not exist
        """
        require_param(asset_id, "assetId")
        if image_params.get("w") is None and image_params.get("h") is None:
            raise ValidationError("Cockpit: Please provide a width (w) or height (h)", details={"parameter": "w/h"})
        params = {key: value.value if isinstance(value, Enum) else value for key, value in image_params.items()}
        return await self.http.fetch_text(self.url.build(f"/assets/image/{asset_id}", query_params=params))
    
    async def upload_assets(self, files: List[Tuple[str, Any, str]], folder: Optional[str] = None) -> Optional[Any]:
        """Upload assets; always sent with admin access.
        
        Args:
            files: ``(filename, content, content_type)`` tuples
            folder: Optional target folder name
        """
        require_param(files, "files")
        if not files:
            return {"assets": []}
        url = self.url.build("/unchained/assets/upload", query_params={"folder": folder or None})
        return await self.http.post_files(url, [("files[]", file) for file in files], use_admin_access=True)
    
    # Search and localization addons
    
    async def search(
        self,
        index: str,
        q: Optional[str] = None,
        fields: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Optional[Any]:
        """Query a Detektivo search index."""
        require_param(index, "a search index")
        url = self.url.build(
            f"/detektivo/search/{index}",
            query_params={"q": q, "fields": fields, "limit": limit, "offset": offset},
        )
        return await self.http.fetch(url)
    
    async def localize(self, project_name: str, locale: str = "default", nested: bool = False) -> Optional[Any]:
        """Get the translations of a Lokalize project."""
        require_param(project_name, "projectName")
        url = self.url.build(f"/lokalize/project/{project_name}", locale=locale, query_params={"nested": nested})
        return await self.http.fetch(url)
    
    # GraphQL
    
    async def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """Run a GraphQL query against the (tenant aware) GraphQL endpoint."""
        require_param(query, "a query")
        return await self.http.post(self.url.graphql_endpoint(), {"query": query, "variables": variables})
    
    # System
    
    async def health_check(self) -> Optional[Any]:
        return await self.http.fetch(self.url.build("/system/healthcheck"))
    
    async def clear_cache(self, pattern: Optional[str] = None) -> None:
        """Clear this client's cache entries, optionally only keys starting with ``pattern``."""
        await self.cache.clear(pattern)


async def create_client(options: Union[CockpitOptions, Dict[str, Any], None] = None, **kwargs: Any) -> CockpitClient:
    """Create a client from options or a plain dict of option values."""
    if isinstance(options, dict):
        options = CockpitOptions(**options)
    return await CockpitClient.create(options, **kwargs)
