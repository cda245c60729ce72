"""Cache entities and protocols."""

from .protocols import CacheStore, CacheManagerProtocol

__all__ = ["CacheStore", "CacheManagerProtocol"]
