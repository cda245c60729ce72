"""Response transformer feature.

- entities/: Transformer protocol, identity transformer, asset configuration
- services/: Asset path, page link, combined and composed transformers
"""

from .entities import ResponseTransformer, IdentityTransformer, identity_transformer, AssetPathConfig
from .services import (
    AssetPathTransformer,
    transform_asset_paths,
    PageLinkTransformer,
    transform_page_links,
    ImagePathTransformer,
    ComposedTransformer,
    compose_transformers,
)

__all__ = [
    "ResponseTransformer",
    "IdentityTransformer",
    "identity_transformer",
    "AssetPathConfig",
    "AssetPathTransformer",
    "transform_asset_paths",
    "PageLinkTransformer",
    "transform_page_links",
    "ImagePathTransformer",
    "ComposedTransformer",
    "compose_transformers",
]
