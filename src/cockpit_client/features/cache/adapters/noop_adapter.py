"""No-op cache store used when caching is disabled."""

from typing import Any, Optional

from ..entities.protocols import CacheStore


class NoopCacheStore(CacheStore):
    """Store that accepts every write and never reports a hit."""
    
    async def get(self, key: str) -> Optional[Any]:
        return None
    
    async def set(self, key: str, value: Any) -> None:
        return None
    
    async def clear(self, prefix: Optional[str] = None) -> None:
        return None
