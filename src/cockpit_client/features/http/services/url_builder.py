"""URL construction for Cockpit REST and GraphQL endpoints."""

from typing import Any, Callable, Mapping, Optional
from urllib.parse import urlsplit, urlunsplit

from ....config.settings import CockpitConfig
from ....utils.query_string import build_query_string


def create_locale_normalizer(default_language: str) -> Callable[[Optional[str]], str]:
    """Map ``default_language`` (and no locale) to Cockpit's ``"default"`` locale."""
    
    def normalize(locale: Optional[str] = None) -> str:
        if locale is None or locale == default_language:
            return "default"
        return locale
    
    return normalize


class UrlBuilder:
    """Builds tenant-aware API URLs for a configuration."""
    
    def __init__(self, config: CockpitConfig):
        self.config = config
        self._parts = urlsplit(config.endpoint)
        self._api_base_path = f"/:{config.tenant}/api" if config.tenant else "/api"
        self._normalize_locale = create_locale_normalizer(config.default_language)
    
    @property
    def origin(self) -> str:
        return f"{self._parts.scheme}://{self._parts.netloc}"
    
    def build(
        self,
        path: str,
        locale: Optional[str] = "default",
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Build a URL for an API endpoint.
        
        Args:
            path: API path below ``/api`` (e.g. ``/pages/pages``)
            locale: Requested locale; the default language maps to "default"
            query_params: Extra query parameters (None values are dropped)
        """
        params = dict(query_params or {})
        params["locale"] = self._normalize_locale(locale)
        query = build_query_string(params)
        
        url = f"{self.origin}{self._api_base_path}{path}"
        return f"{url}?{query}" if query is not None else url
    
    def graphql_endpoint(self) -> str:
        """Get the GraphQL endpoint URL, tenant-prefixed when configured."""
        path = f"/:{self.config.tenant}{self._parts.path}" if self.config.tenant else self._parts.path
        return urlunsplit((self._parts.scheme, self._parts.netloc, path, self._parts.query, ""))
