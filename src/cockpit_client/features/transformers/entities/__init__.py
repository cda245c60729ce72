"""Transformer entities and protocols."""

from .protocols import ResponseTransformer, IdentityTransformer, identity_transformer, AssetPathConfig

__all__ = ["ResponseTransformer", "IdentityTransformer", "identity_transformer", "AssetPathConfig"]
