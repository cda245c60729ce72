"""Configuration for cockpit-client."""

from .settings import (
    CockpitSettings,
    CockpitOptions,
    CockpitConfig,
    build_cache_prefix,
    create_config,
    get_settings,
    DEFAULT_CACHE_MAX,
    DEFAULT_CACHE_TTL_MS,
    DEFAULT_LANGUAGE,
)
from .logging_config import LoggingConfig, setup_logging, get_logger

__all__ = [
    "CockpitSettings",
    "CockpitOptions",
    "CockpitConfig",
    "build_cache_prefix",
    "create_config",
    "get_settings",
    "DEFAULT_CACHE_MAX",
    "DEFAULT_CACHE_TTL_MS",
    "DEFAULT_LANGUAGE",
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
