"""Tests for the combined asset path and page link transformer."""

import logging

import pytest

from cockpit_client.features.transformers import ImagePathTransformer, identity_transformer

from conftest import TEST_ORIGIN


class TestImagePathTransformer:
    """Test asset path fixing and link resolution in one pass."""
    
    def test_prefixes_path_fields_with_storage_url(self):
        transformer = ImagePathTransformer(TEST_ORIGIN)
        
        result = transformer.transform({"image": {"path": "/uploads/image.jpg"}})
        
        assert result == {"image": {"path": "https://test.cockpit.com/storage/uploads/uploads/image.jpg"}}
    
    def test_fixes_src_attribute_in_html(self):
        transformer = ImagePathTransformer(TEST_ORIGIN)
        
        result = transformer.transform({"html": '<img src="/storage/uploads/image.jpg" />'})
        
        assert result["html"] == '<img src="https://test.cockpit.com/storage/uploads/image.jpg" />'
    
    def test_fixes_href_attribute_and_keeps_tenant_segment(self):
        transformer = ImagePathTransformer(TEST_ORIGIN, tenant="acme")
        
        result = transformer.transform({"html": '<a href="/:acme/storage/uploads/doc.pdf">doc</a>'})
        
        assert result["html"] == '<a href="https://test.cockpit.com/:acme/storage/uploads/doc.pdf">doc</a>'
    
    def test_leaves_non_storage_attributes_alone(self):
        transformer = ImagePathTransformer(TEST_ORIGIN)
        html = '<a href="/about">About</a><img src="https://cdn.example.com/x.png">'
        
        assert transformer.transform({"html": html}) == {"html": html}
    
    def test_replaces_page_links(self):
        transformer = ImagePathTransformer(
            TEST_ORIGIN, {"pages://abc123": "/about", "pages://def456": "/contact"}
        )
        
        result = transformer.transform({"link": "pages://abc123", "other": "pages://def456"})
        
        assert result == {"link": "/about", "other": "/contact"}
    
    def test_unknown_link_is_preserved(self):
        transformer = ImagePathTransformer(TEST_ORIGIN, {"pages://known": "/known"})
        
        assert transformer.transform({"text": "pages://unknown-id"}) == {"text": "pages://unknown-id"}
    
    def test_none_replacement_leaves_link_unchanged(self):
        transformer = ImagePathTransformer(TEST_ORIGIN, {"pages://p1": None, "pages://p2": "/two"})
        
        result = transformer.transform({"a": "pages://p1", "b": "pages://p2"})
        
        assert result == {"a": "pages://p1", "b": "/two"}
    
    def test_multiple_links_in_one_string(self):
        transformer = ImagePathTransformer(TEST_ORIGIN, {"pages://id1": "/page1", "pages://id2": "/page2"})
        
        result = transformer.transform({"text": "Link to pages://id1 and pages://id2"})
        
        assert result["text"] == "Link to /page1 and /page2"
    
    def test_longest_key_wins(self):
        transformer = ImagePathTransformer(TEST_ORIGIN, {"pages://id1": "/one", "pages://id10": "/ten"})
        
        assert transformer.transform({"link": "pages://id10"}) == {"link": "/ten"}
    
    def test_route_with_quotes_keeps_json_valid(self):
        transformer = ImagePathTransformer(TEST_ORIGIN, {"pages://q": '/say-"hi"'})
        
        assert transformer.transform({"link": "pages://q"}) == {"link": '/say-"hi"'}
    
    def test_deeply_nested_and_arrays(self):
        transformer = ImagePathTransformer(TEST_ORIGIN, {"pages://id1": "/page1"})
        
        result = transformer.transform({
            "level1": {"level2": {"level3": {"link": "pages://id1"}}},
            "items": [{"link": "pages://id1"}, {"link": "pages://id1"}],
        })
        
        assert result["level1"]["level2"]["level3"]["link"] == "/page1"
        assert [item["link"] for item in result["items"]] == ["/page1", "/page1"]
    
    def test_collapses_duplicate_storage_segments(self):
        transformer = ImagePathTransformer(TEST_ORIGIN)
        
        result = transformer.transform({"url": "https://example.com/storage/uploads/storage/uploads/image.jpg"})
        
        assert result["url"] == "https://example.com/storage/uploads/image.jpg"
    
    def test_path_fixing_is_idempotent(self):
        transformer = ImagePathTransformer(TEST_ORIGIN)
        
        once = transformer.transform({"path": "/storage/uploads/a.jpg"})
        
        assert once == {"path": "https://test.cockpit.com/storage/uploads/a.jpg"}
        assert "/storage/uploads/storage/uploads/" not in once["path"]
    
    def test_tenant_in_path_url(self):
        transformer = ImagePathTransformer(TEST_ORIGIN, tenant="mytenant")
        
        result = transformer.transform({"image": {"path": "/uploads/image.jpg"}})
        
        assert result["image"]["path"] == "https://test.cockpit.com/:mytenant/storage/uploads/uploads/image.jpg"
    
    def test_payload_without_matches_round_trips(self):
        transformer = ImagePathTransformer(TEST_ORIGIN, {"pages://p1": "/about"})
        payload = {
            "text": "Hello World",
            "number": 42,
            "float": 1.5,
            "bool": True,
            "none": None,
            "arr": [1, 2, 3],
            "nested": {"title": "Ünïcödé"},
        }
        
        assert transformer.transform(payload) == payload
    
    def test_cyclic_value_returns_original(self, caplog):
        transformer = ImagePathTransformer(TEST_ORIGIN)
        circular = {}
        circular["self"] = circular
        
        with caplog.at_level(logging.WARNING):
            result = transformer.transform(circular)
        
        assert result is circular
        assert "Failed to transform response" in caplog.text
    
    def test_non_serializable_value_returns_original(self):
        transformer = ImagePathTransformer(TEST_ORIGIN)
        payload = {"value": object()}
        
        assert transformer.transform(payload) is payload
    
    def test_untouched_payload_keeps_python_types(self):
        transformer = ImagePathTransformer(TEST_ORIGIN, {"pages://p1": "/about"})
        payload = {1: "a", "t": (1, 2)}

        result = transformer.transform(payload)

        assert result is payload
        assert result == {1: "a", "t": (1, 2)}

    def test_end_to_end(self):
        transformer = ImagePathTransformer("https://cms.test", {"pages://p1": "/about"})
        
        result = transformer.transform({"link": "pages://p1", "img": {"path": "/up/a.jpg"}})
        
        assert result == {"link": "/about", "img": {"path": "https://cms.test/storage/uploads/up/a.jpg"}}


class TestIdentityTransformer:
    """Test the identity transformer."""
    
    def test_returns_input_unchanged(self):
        payload = {"foo": "bar", "num": 42}
        assert identity_transformer.transform(payload) is payload
