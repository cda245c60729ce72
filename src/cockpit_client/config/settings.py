"""
Configuration management for the Cockpit API client.

Environment variables are read in exactly one place (``CockpitSettings``);
everything downstream receives an explicit, immutable ``CockpitConfig``.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError
from ..utils.tenant import resolve_api_key

DEFAULT_CACHE_MAX = 100
DEFAULT_CACHE_TTL_MS = 100000
DEFAULT_LANGUAGE = "de"


class CockpitSettings(BaseSettings):
    """Process-level settings sourced from ``COCKPIT_*`` environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="COCKPIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    graphql_endpoint: Optional[str] = Field(default=None, description="Cockpit endpoint URL")
    secret: Optional[str] = Field(default=None, description="Default API key")
    cache_max: Optional[int] = Field(default=None, ge=1, description="Max cache entries")
    cache_ttl: Optional[int] = Field(default=None, ge=0, description="Cache TTL in milliseconds")
    default_language: Optional[str] = Field(default=None, description="Language mapped to Cockpit's 'default' locale")
    tenant_secrets: Optional[Dict[str, str]] = Field(
        default=None,
        description="Per-tenant API keys; COCKPIT_SECRET_<TENANT> variables are used when unset",
    )
    
    def api_key_for(self, tenant: Optional[str] = None) -> Optional[str]:
        """Resolve the API key for a tenant, or the default secret without one.
        
        A tenant only ever uses its own secret; it never falls back to
        ``secret``.
        """
        if not tenant:
            return self.secret
        if self.tenant_secrets is not None:
            return self.tenant_secrets.get(tenant.lower())
        return resolve_api_key(tenant, environ=os.environ)


class CockpitOptions(BaseModel):
    """Explicit options supplied by the caller. Unset values fall back to settings."""
    
    endpoint: Optional[str] = None
    tenant: Optional[str] = None
    api_key: Optional[str] = None
    use_admin_access: bool = False
    cache_max: Optional[int] = Field(default=None, ge=1)
    cache_ttl_ms: Optional[int] = Field(default=None, ge=0)
    default_language: Optional[str] = None
    preload_routes: bool = False
    cache_enabled: bool = True


@dataclass(frozen=True)
class CockpitConfig:
    """Immutable configuration consumed by the client components."""
    
    endpoint: str
    tenant: Optional[str] = None
    api_key: Optional[str] = None
    use_admin_access: bool = False
    cache_max: int = DEFAULT_CACHE_MAX
    cache_ttl_ms: int = DEFAULT_CACHE_TTL_MS
    default_language: str = DEFAULT_LANGUAGE
    
    @property
    def cache_prefix(self) -> str:
        """Structural cache prefix isolating this endpoint/tenant pair."""
        return build_cache_prefix(self.endpoint, self.tenant)


def build_cache_prefix(endpoint: str, tenant: Optional[str] = None) -> str:
    """Build the ``<endpoint>:<tenant-or-default>:`` cache key prefix."""
    return f"{endpoint}:{tenant or 'default'}:"


@lru_cache()
def get_settings() -> CockpitSettings:
    """Get cached settings instance."""
    return CockpitSettings()


def create_config(
    options: Optional[CockpitOptions] = None,
    settings: Optional[CockpitSettings] = None,
) -> CockpitConfig:
    """Create an immutable configuration for the Cockpit API client.
    
    Explicit options take precedence over settings. The environment is only
    consulted through ``settings``.
    
    Args:
        options: Caller supplied options
        settings: Environment settings (defaults to ``get_settings()``)
        
    Returns:
        Frozen CockpitConfig
        
    Raises:
        ConfigurationError: If no endpoint is available
    """
    options = options or CockpitOptions()
    settings = settings if settings is not None else get_settings()
    
    endpoint = options.endpoint or settings.graphql_endpoint
    if not endpoint:
        raise ConfigurationError(
            "Cockpit: endpoint is required (provide via options or COCKPIT_GRAPHQL_ENDPOINT env var)"
        )
    
    cache_max = options.cache_max if options.cache_max is not None else settings.cache_max
    cache_ttl_ms = options.cache_ttl_ms if options.cache_ttl_ms is not None else settings.cache_ttl
    
    return CockpitConfig(
        endpoint=endpoint,
        tenant=options.tenant,
        api_key=options.api_key if options.api_key is not None else settings.api_key_for(options.tenant),
        use_admin_access=options.use_admin_access,
        cache_max=cache_max if cache_max is not None else DEFAULT_CACHE_MAX,
        cache_ttl_ms=cache_ttl_ms if cache_ttl_ms is not None else DEFAULT_CACHE_TTL_MS,
        default_language=options.default_language or settings.default_language or DEFAULT_LANGUAGE,
    )
