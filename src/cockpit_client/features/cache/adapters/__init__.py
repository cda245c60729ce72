"""Cache adapters - in-memory, no-op and Redis implementations."""

from .memory_adapter import MemoryCacheStore
from .noop_adapter import NoopCacheStore
from .redis_adapter import RedisCacheStore

__all__ = [
    "MemoryCacheStore",
    "NoopCacheStore",
    "RedisCacheStore",
]
