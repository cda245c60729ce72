"""Tests for asset-path-only transformation."""

import pytest

from cockpit_client.features.transformers import (
    AssetPathConfig,
    AssetPathTransformer,
    transform_asset_paths,
)


class TestTransformAssetPaths:
    """Test string level asset rewriting."""
    
    def test_path_field(self):
        config = AssetPathConfig(base_url="https://cms.test")
        
        assert transform_asset_paths('{"path":"/a.jpg"}', config) == '{"path":"https://cms.test/storage/uploads/a.jpg"}'
    
    def test_relative_path_is_untouched(self):
        config = AssetPathConfig(base_url="https://cms.test")
        
        assert transform_asset_paths('{"path":"a.jpg"}', config) == '{"path":"a.jpg"}'
    
    def test_uppercase_attribute_is_normalized(self):
        config = AssetPathConfig(base_url="https://cms.test")
        
        result = transform_asset_paths('{"html":"<img SRC=\\"/storage/x.png\\">"}', config)
        
        assert result == '{"html":"<img src=\\"https://cms.test/storage/x.png\\">"}'
    
    def test_triple_duplicate_collapses(self):
        config = AssetPathConfig(base_url="https://cms.test")
        
        result = transform_asset_paths('"/storage/uploads/storage/uploads/storage/uploads/a"', config)
        
        assert result == '"/storage/uploads/a"'
    
    @pytest.mark.parametrize("tenant,expected", [
        (None, "https://cms.test"),
        ("", "https://cms.test"),
        ("acme", "https://cms.test/:acme"),
    ])
    def test_tenant_url(self, tenant, expected):
        assert AssetPathConfig(base_url="https://cms.test", tenant=tenant).tenant_url == expected


class TestAssetPathTransformer:
    """Test the standalone asset transformer."""
    
    def test_does_not_resolve_links(self):
        transformer = AssetPathTransformer(AssetPathConfig(base_url="https://cms.test"))
        
        result = transformer.transform({"link": "pages://p1", "image": {"path": "/a.jpg"}})
        
        assert result == {"link": "pages://p1", "image": {"path": "https://cms.test/storage/uploads/a.jpg"}}
    
    def test_cyclic_value_returns_original(self):
        transformer = AssetPathTransformer(AssetPathConfig(base_url="https://cms.test"))
        circular = []
        circular.append(circular)
        
        assert transformer.transform(circular) is circular
