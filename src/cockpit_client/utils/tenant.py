"""Tenant utilities for multi-tenant Cockpit CMS setups.

Tenants are discovered from ``COCKPIT_SECRET_<TENANT>`` environment variables.
All functions accept an explicit ``environ`` mapping so callers (and tests)
never depend on process-wide state implicitly.
"""

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional
from urllib.parse import urlsplit

SECRET_ENV_NAME = "COCKPIT_SECRET"


@dataclass(frozen=True)
class TenantUrlResult:
    """Result of tenant resolution from a URL."""
    tenant: Optional[str]
    slug: Optional[str]
    hostname: str


def _environ(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def get_tenant_ids(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Get all configured tenant IDs from ``COCKPIT_SECRET_<TENANT>`` variables."""
    prefix = f"{SECRET_ENV_NAME}_"
    return [
        key[len(prefix):].lower()
        for key in _environ(environ)
        if key.startswith(prefix) and not key.endswith("_FILE")
    ]


def resolve_api_key(
    tenant: Optional[str] = None,
    api_key: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    default_secret: Optional[str] = None,
) -> Optional[str]:
    """Resolve the API key for a tenant.
    
    Priority: explicit ``api_key`` > ``COCKPIT_SECRET_<TENANT>`` (tenant set)
    > ``COCKPIT_SECRET`` / ``default_secret`` (no tenant).
    """
    if api_key is not None:
        return api_key
    env = _environ(environ)
    if tenant:
        return env.get(f"{SECRET_ENV_NAME}_{tenant}".upper())
    return env.get(SECRET_ENV_NAME, default_secret)


def resolve_tenant_from_subdomain(
    subdomain: Optional[str],
    default_host: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Resolve a tenant ID from a subdomain.
    
    Returns None if the subdomain matches ``default_host`` or is not a
    configured tenant.
    """
    if subdomain is None:
        return None
    
    normalized = subdomain.lower()
    if default_host is not None and normalized == default_host.lower():
        return None
    
    if normalized in get_tenant_ids(environ):
        return normalized
    return None


def resolve_tenant_from_url(
    url: str,
    default_host: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> TenantUrlResult:
    """Resolve tenant ID and slug from a URL.
    
    Example:
        With ``COCKPIT_SECRET_MYTENANT`` set,
        ``resolve_tenant_from_url("https://mytenant.example.com/some/page")``
        returns ``TenantUrlResult(tenant="mytenant", slug="page",
        hostname="mytenant.example.com")``.
    """
    parts = urlsplit(url)
    hostname = parts.hostname or ""
    
    segments = [segment for segment in parts.path.split("/") if segment]
    slug = segments[-1] if segments else None
    
    subdomain = hostname.split(".")[0] if hostname else None
    tenant = resolve_tenant_from_subdomain(subdomain, default_host=default_host, environ=environ)
    
    return TenantUrlResult(tenant=tenant, slug=slug, hostname=hostname)
