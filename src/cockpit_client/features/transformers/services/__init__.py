"""Transformer services."""

from .asset_path import AssetPathTransformer, transform_asset_paths
from .page_link import PageLinkTransformer, transform_page_links
from .image_path import ImagePathTransformer
from .compose import ComposedTransformer, compose_transformers

__all__ = [
    "AssetPathTransformer",
    "transform_asset_paths",
    "PageLinkTransformer",
    "transform_page_links",
    "ImagePathTransformer",
    "ComposedTransformer",
    "compose_transformers",
]
