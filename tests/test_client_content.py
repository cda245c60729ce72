"""Tests for the content, menu, asset, search and GraphQL client methods."""

import json
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from cockpit_client import CockpitClient, CockpitOptions, ImageSizeMode
from cockpit_client.core.exceptions import ValidationError
from cockpit_client.features.cache import NoopCacheStore

from conftest import TEST_ENDPOINT, json_response


def query_of(request: httpx.Request) -> dict:
    return {key: values[0] for key, values in parse_qs(urlsplit(str(request.url)).query).items()}


@pytest.fixture
def make_client(make_http_client, empty_settings, clean_cockpit_env):
    """Factory for a client over a recording transport."""
    async def _make(handler, **options):
        http_client, transport = make_http_client(handler)
        client = await CockpitClient.create(
            CockpitOptions(endpoint=TEST_ENDPOINT, **options),
            settings=empty_settings,
            http_client=http_client,
        )
        return client, transport
    return _make


class TestContent:
    """Test content API methods."""
    
    @pytest.mark.asyncio
    async def test_get_content_items(self, make_client):
        client, transport = await make_client(json_response([{"_id": "n1", "cover": {"path": "/n.jpg"}}]))
        
        result = await client.get_content_items("news", locale="en", limit=5, filter={"published": True})
        
        assert result == [{"_id": "n1", "cover": {"path": "https://test.cockpit.com/storage/uploads/n.jpg"}}]
        request = transport.requests[0]
        assert request.url.path == "/api/content/items/news"
        query = query_of(request)
        assert query["limit"] == "5"
        assert json.loads(query["filter"]) == {"published": True}
        assert query["locale"] == "en"
    
    @pytest.mark.asyncio
    async def test_get_content_item_with_and_without_id(self, make_client):
        client, transport = await make_client(json_response({"_id": "x"}))
        
        await client.get_content_item("settings")
        await client.get_content_item("news", "n1")
        
        assert [request.url.path for request in transport.requests] == [
            "/api/content/item/settings",
            "/api/content/item/news/n1",
        ]
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("model", ["../secrets", "news/../x", "a b", "news\n"])
    async def test_rejects_path_traversal(self, make_client, model):
        client, transport = await make_client(json_response({}))
        
        with pytest.raises(ValidationError):
            await client.get_content_items(model)
        assert transport.requests == []
    
    @pytest.mark.asyncio
    async def test_requires_model(self, make_client):
        client, _ = await make_client(json_response({}))
        
        with pytest.raises(ValidationError):
            await client.get_content_item("")
    
    @pytest.mark.asyncio
    async def test_content_tree_defaults_filter(self, make_client):
        client, transport = await make_client(json_response([]))
        
        await client.get_content_tree("navigation", parent="root")
        
        query = query_of(transport.requests[0])
        assert transport.requests[0].url.path == "/api/content/tree/navigation"
        assert query["parent"] == "root"
        assert json.loads(query["filter"]) == {}
    
    @pytest.mark.asyncio
    async def test_aggregate_sends_pipeline(self, make_client):
        client, transport = await make_client(json_response([]))
        pipeline = [{"$match": {"published": True}}]
        
        await client.get_aggregate_model("news", pipeline)
        
        assert json.loads(query_of(transport.requests[0])["pipeline"]) == pipeline
    
    @pytest.mark.asyncio
    async def test_post_and_delete_content_item(self, make_client):
        client, transport = await make_client(json_response({"_id": "n1"}))
        
        await client.post_content_item("news", {"title": "Hello"})
        await client.delete_content_item("news", "n1")
        
        post, delete = transport.requests
        assert post.method == "POST"
        assert json.loads(post.content) == {"data": {"title": "Hello"}}
        assert delete.method == "DELETE"
        assert delete.url.path == "/api/content/item/news/n1"


class TestMenusAssetsAddons:
    """Test menus, assets, search, localize and GraphQL."""
    
    @pytest.mark.asyncio
    async def test_menus(self, make_client):
        client, transport = await make_client(json_response([]))
        
        await client.pages_menus(locale="en", inactive=True)
        await client.pages_menu("main")
        
        assert transport.requests[0].url.path == "/api/pages/menus"
        assert query_of(transport.requests[0])["inactive"] == "true"
        assert transport.requests[1].url.path == "/api/pages/menu/main"
    
    @pytest.mark.asyncio
    async def test_asset_by_id(self, make_client):
        client, transport = await make_client(json_response({"_id": "a1", "path": "/a.jpg"}))
        
        asset = await client.asset_by_id("a1")
        
        assert asset["path"] == "https://test.cockpit.com/storage/uploads/a.jpg"
        assert transport.requests[0].url.path == "/api/assets/a1"
    
    @pytest.mark.asyncio
    async def test_image_asset_by_id_returns_text(self, make_client):
        client, transport = await make_client(
            lambda request: httpx.Response(200, text="https://test.cockpit.com/storage/thumbs/a.webp")
        )
        
        url = await client.image_asset_by_id("a1", w=300, m=ImageSizeMode.BEST_FIT)
        
        assert url == "https://test.cockpit.com/storage/thumbs/a.webp"
        query = query_of(transport.requests[0])
        assert query["w"] == "300"
        assert query["m"] == "bestFit"
    
    @pytest.mark.asyncio
    async def test_image_asset_requires_dimension(self, make_client):
        client, transport = await make_client(json_response({}))
        
        with pytest.raises(ValidationError):
            await client.image_asset_by_id("a1", q=80)
        assert transport.requests == []
    
    @pytest.mark.asyncio
    async def test_upload_assets_uses_admin_access(self, make_http_client, empty_settings, clean_cockpit_env):
        http_client, transport = make_http_client(json_response({"assets": [{"_id": "a1"}]}))
        client = await CockpitClient.create(
            CockpitOptions(endpoint=TEST_ENDPOINT, api_key="secret"),
            settings=empty_settings,
            http_client=http_client,
        )
        
        result = await client.upload_assets([("a.txt", b"hello", "text/plain")], folder="docs")
        
        request = transport.requests[0]
        assert result == {"assets": [{"_id": "a1"}]}
        assert request.url.path == "/api/unchained/assets/upload"
        assert query_of(request)["folder"] == "docs"
        assert request.headers["api-Key"] == "secret"
    
    @pytest.mark.asyncio
    async def test_upload_nothing(self, make_client):
        client, transport = await make_client(json_response({}))
        
        assert await client.upload_assets([]) == {"assets": []}
        assert transport.requests == []
    
    @pytest.mark.asyncio
    async def test_search(self, make_client):
        client, transport = await make_client(json_response({"hits": [], "total": 0}))
        
        await client.search("pages", q="coffee", limit=10)
        
        request = transport.requests[0]
        assert request.url.path == "/api/detektivo/search/pages"
        assert query_of(request)["q"] == "coffee"
    
    @pytest.mark.asyncio
    async def test_localize(self, make_client):
        client, transport = await make_client(json_response({"hello": "Hallo"}))
        
        assert await client.localize("website", locale="de", nested=True) == {"hello": "Hallo"}
        
        query = query_of(transport.requests[0])
        assert transport.requests[0].url.path == "/api/lokalize/project/website"
        assert query["nested"] == "true"
        assert query["locale"] == "default"
    
    @pytest.mark.asyncio
    async def test_graphql_posts_to_tenant_endpoint(self, make_client):
        client, transport = await make_client(json_response({"data": {"ok": True}}), tenant="acme")
        
        result = await client.graphql("{ ok }", {"id": 1})
        
        request = transport.requests[0]
        assert result == {"data": {"ok": True}}
        assert str(request.url) == "https://test.cockpit.com/:acme/api/graphql"
        assert json.loads(request.content) == {"query": "{ ok }", "variables": {"id": 1}}


class TestCacheDisabled:
    @pytest.mark.asyncio
    async def test_cache_enabled_false_uses_noop_store(self, make_client):
        client, transport = await make_client(json_response([{"_id": "p1", "_r": "/a", "data": {"collection": "news"}}]), cache_enabled=False)
        
        assert isinstance(client.cache.store, NoopCacheStore)
        await client.get_full_route_for_slug("news")
        await client.get_full_route_for_slug("news")
        assert len(transport.requests) == 2
