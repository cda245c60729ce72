"""Combined transformer for asset paths and page links.

Runs asset path fixing and page link resolution over a single serialized
buffer, so the duplicate-segment cleanup sees the output of both passes.
"""

from typing import Mapping, Optional, TypeVar

from .asset_path import collapse_duplicate_uploads, rewrite_asset_paths
from .page_link import prepare_link_lookup, substitute_links
from .serialization import rewrite_json
from ..entities.protocols import AssetPathConfig

T = TypeVar("T")


class ImagePathTransformer:
    """Fixes asset paths and resolves page links in one stringify/parse cycle."""
    
    def __init__(
        self,
        base_url: str,
        replacements: Optional[Mapping[str, Optional[str]]] = None,
        tenant: Optional[str] = None,
    ):
        """
        Initialize transformer.
        
        Args:
            base_url: Origin of the Cockpit CMS
            replacements: Route replacement table (``pages://id`` -> route)
            tenant: Tenant name for multi-tenant setups
        """
        self.config = AssetPathConfig(base_url=base_url, tenant=tenant)
        self.replacements = dict(replacements or {})
        self._pattern, self._lookup = prepare_link_lookup(self.replacements)
    
    def _rewrite(self, json_string: str) -> str:
        json_string = rewrite_asset_paths(json_string, self.config)
        json_string = substitute_links(json_string, self._pattern, self._lookup)
        return collapse_duplicate_uploads(json_string)
    
    def transform(self, value: T) -> T:
        return rewrite_json(value, self._rewrite, "Failed to transform response")
