"""Cache protocols for cockpit-client.

This module defines the store contract shared by the in-memory, no-op and
Redis implementations, and the prefixed manager contract built on top of it.
"""

from abc import abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for key/value cache stores.
    
    ``get`` reports a miss as ``None`` and only raises on genuine backend
    failure. ``clear`` removes every key starting with ``prefix``, or every
    key when no prefix is given.
    """
    
    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Get value by key, ``None`` when absent or expired."""
        ...
    
    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store a non-``None`` value under key."""
        ...
    
    @abstractmethod
    async def clear(self, prefix: Optional[str] = None) -> None:
        """Remove all keys starting with prefix (all keys if omitted)."""
        ...


@runtime_checkable
class CacheManagerProtocol(Protocol):
    """Protocol for a logical cache bound to a fixed key prefix."""
    
    @property
    @abstractmethod
    def prefix(self) -> str:
        """Get the structural key prefix."""
        ...
    
    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Get value for a logical key."""
        ...
    
    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Set value for a logical key."""
        ...
    
    @abstractmethod
    async def clear(self, pattern: Optional[str] = None) -> None:
        """Clear this cache, or only keys starting with ``pattern``."""
        ...
