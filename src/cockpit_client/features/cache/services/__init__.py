"""Cache services."""

from .cache_manager import CacheManager, create_cache_manager

__all__ = ["CacheManager", "create_cache_manager"]
