"""Cache feature for cockpit-client.

Feature-First architecture with in-memory, no-op and Redis store support:
- entities/: Cache store and manager protocols
- adapters/: Store implementations
- services/: Prefixed cache manager
"""

from .entities.protocols import CacheStore, CacheManagerProtocol
from .adapters import MemoryCacheStore, NoopCacheStore, RedisCacheStore
from .services import CacheManager, create_cache_manager

__all__ = [
    "CacheStore",
    "CacheManagerProtocol",
    "MemoryCacheStore",
    "NoopCacheStore",
    "RedisCacheStore",
    "CacheManager",
    "create_cache_manager",
]
