"""Redis cache store adapter for cockpit-client."""

import json
import logging
import re
from typing import Any, Optional

import redis.asyncio as redis
from redis.asyncio import Redis

from ..entities.protocols import CacheStore

logger = logging.getLogger(__name__)

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def escape_glob(value: str) -> str:
    """Escape Redis glob metacharacters so ``value`` matches literally."""
    return _GLOB_SPECIAL.sub(r"\\\1", value)


class RedisCacheStore(CacheStore):
    """Remote store backed by ``redis.asyncio``.
    
    Values are stored as JSON. Expiry is delegated to Redis (``PX``).
    Backend errors are not caught: a misbehaving Redis surfaces to the caller.
    """
    
    def __init__(self, redis_client: Redis, ttl_ms: Optional[int] = None, scan_count: int = 100):
        """
        Initialize Redis store.
        
        Args:
            redis_client: Connected ``redis.asyncio`` client
            ttl_ms: Optional expiry in milliseconds applied on every set
            scan_count: SCAN batch size hint used by ``clear``
        """
        self.redis_client = redis_client
        self.ttl_ms = ttl_ms
        self.scan_count = scan_count
    
    @classmethod
    def from_url(cls, url: str, ttl_ms: Optional[int] = None) -> "RedisCacheStore":
        """Create a store from a ``redis://`` URL."""
        return cls(redis.from_url(url, decode_responses=True), ttl_ms=ttl_ms)
    
    async def get(self, key: str) -> Optional[Any]:
        """Get value by key."""
        raw = await self.redis_client.get(key)
        if raw is None:
            return None
        return json.loads(raw)
    
    async def set(self, key: str, value: Any) -> None:
        """Set key-value pair with the configured expiry."""
        await self.redis_client.set(key, json.dumps(value), px=self.ttl_ms or None)
    
    async def clear(self, prefix: Optional[str] = None) -> None:
        """Delete every key starting with prefix (all keys if omitted)."""
        match = f"{escape_glob(prefix)}*" if prefix is not None else "*"
        keys = [key async for key in self.redis_client.scan_iter(match=match, count=self.scan_count)]
        if keys:
            await self.redis_client.delete(*keys)
            logger.debug(f"Cleared {len(keys)} Redis keys matching {match}")
    
    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self.redis_client.aclose()
