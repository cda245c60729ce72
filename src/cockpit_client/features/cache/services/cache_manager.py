"""Prefixed cache manager.

A manager binds a store to a structural prefix (``<endpoint>:<tenant>:``) so
that several logical caches can share one store without observing each
other's entries.
"""

import logging
from typing import Any, Optional

from ..entities.protocols import CacheManagerProtocol, CacheStore
from ..adapters.memory_adapter import MemoryCacheStore, DEFAULT_MAX_ENTRIES, DEFAULT_TTL_MS
from ..adapters.noop_adapter import NoopCacheStore
from ....core.exceptions import CacheValueError

logger = logging.getLogger(__name__)


class CacheManager(CacheManagerProtocol):
    """Cache wrapper that prefixes every logical key."""
    
    def __init__(self, store: CacheStore, prefix: str):
        """
        Initialize cache manager.
        
        Args:
            store: Underlying store, possibly shared with other managers
            prefix: Structural prefix prepended to every key
        """
        self._store = store
        self._prefix = prefix
    
    @property
    def prefix(self) -> str:
        return self._prefix
    
    @property
    def store(self) -> CacheStore:
        return self._store
    
    def _make_key(self, key: str) -> str:
        return f"{self._prefix}{key}"
    
    async def get(self, key: str) -> Optional[Any]:
        """Get value for a logical key. Store failures propagate."""
        return await self._store.get(self._make_key(key))
    
    async def set(self, key: str, value: Any) -> None:
        """Set value for a logical key.
        
        Raises:
            CacheValueError: If value is None (absence is encoded by not caching)
        """
        if value is None:
            raise CacheValueError(f"Cannot cache None for key {key}", details={"key": key})
        await self._store.set(self._make_key(key), value)
    
    async def clear(self, pattern: Optional[str] = None) -> None:
        """Clear keys of this manager, optionally only those starting with ``pattern``."""
        prefix = self._make_key(pattern) if pattern is not None else self._prefix
        await self._store.clear(prefix)
        logger.debug(f"Cleared cache entries with prefix {prefix}")


def create_cache_manager(
    prefix: str,
    max_entries: int = DEFAULT_MAX_ENTRIES,
    ttl_ms: Optional[int] = DEFAULT_TTL_MS,
    store: Optional[CacheStore] = None,
    enabled: bool = True,
) -> CacheManager:
    """Create a cache manager over the given store or a fresh memory store.
    
    Args:
        prefix: Structural key prefix
        max_entries: Capacity of the default memory store
        ttl_ms: TTL of the default memory store in milliseconds
        store: Custom store (owns its own expiry policy)
        enabled: When False the manager is backed by a NoopCacheStore
    """
    if not enabled:
        return CacheManager(NoopCacheStore(), prefix)
    if store is None:
        store = MemoryCacheStore(max_entries=max_entries, ttl_ms=ttl_ms)
    return CacheManager(store, prefix)
