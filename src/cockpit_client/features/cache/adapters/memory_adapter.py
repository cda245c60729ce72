"""Memory cache store adapter for cockpit-client."""

import asyncio
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..entities.protocols import CacheStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 100
DEFAULT_TTL_MS = 100000


@dataclass
class MemoryCacheEntry:
    """Memory cache entry with expiry metadata (monotonic seconds)."""
    value: Any
    created_at: float
    expires_at: Optional[float] = None
    access_count: int = field(default=0)
    
    def is_expired(self, now: float) -> bool:
        """Check if entry is expired at ``now``."""
        if self.expires_at is None:
            return False
        return now >= self.expires_at


class MemoryCacheStore(CacheStore):
    """Bounded in-process store with LRU eviction and TTL expiry.
    
    Expired entries are treated as absent on read and dropped lazily; there
    is no background sweep.
    """
    
    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        ttl_ms: Optional[int] = DEFAULT_TTL_MS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize memory store.
        
        Args:
            max_entries: Maximum number of entries before LRU eviction
            ttl_ms: Time-to-live in milliseconds (``None`` or 0 disables expiry)
            clock: Monotonic clock returning seconds
        """
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        
        self.max_entries = max_entries
        self.ttl_ms = ttl_ms
        self._clock = clock
        self._store: "OrderedDict[str, MemoryCacheEntry]" = OrderedDict()
        self._lock = asyncio.Lock()
    
    async def get(self, key: str) -> Optional[Any]:
        """Get value by key."""
        async with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            
            if entry.is_expired(self._clock()):
                del self._store[key]
                return None
            
            entry.access_count += 1
            self._store.move_to_end(key)
            return entry.value
    
    async def set(self, key: str, value: Any) -> None:
        """Set key-value pair, evicting the least recently used entry if full."""
        now = self._clock()
        expires_at = now + self.ttl_ms / 1000 if self.ttl_ms else None
        
        async with self._lock:
            self._store.pop(key, None)
            while len(self._store) >= self.max_entries:
                evicted_key, _ = self._store.popitem(last=False)
                logger.debug(f"Evicted cache key {evicted_key}")
            
            self._store[key] = MemoryCacheEntry(value=value, created_at=now, expires_at=expires_at)
    
    async def clear(self, prefix: Optional[str] = None) -> None:
        """Clear entries starting with prefix, or everything."""
        async with self._lock:
            if prefix is None:
                self._store.clear()
                return
            
            for key in [key for key in self._store if key.startswith(prefix)]:
                del self._store[key]
    
    async def size(self) -> int:
        """Get number of live (non-expired) entries."""
        async with self._lock:
            now = self._clock()
            for key in [key for key, entry in self._store.items() if entry.is_expired(now)]:
                del self._store[key]
            return len(self._store)
