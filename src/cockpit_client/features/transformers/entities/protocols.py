"""Response transformer protocol and shared configuration."""

from dataclasses import dataclass
from typing import Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class ResponseTransformer(Protocol):
    """Protocol for rewriting decoded JSON responses."""
    
    def transform(self, value: T) -> T:
        """Return the rewritten value (or the input when nothing applies)."""
        ...


class IdentityTransformer:
    """Transformer returning its input unchanged."""
    
    def transform(self, value: T) -> T:
        return value


identity_transformer = IdentityTransformer()


@dataclass(frozen=True)
class AssetPathConfig:
    """Configuration for asset path rewriting."""
    
    base_url: str  # origin only, e.g. "https://cms.example.com"
    tenant: Optional[str] = None
    
    @property
    def tenant_url(self) -> str:
        """Base URL scoped to the tenant (``<base>/:<tenant>``)."""
        return f"{self.base_url}/:{self.tenant}" if self.tenant else self.base_url
