"""Pytest configuration and fixtures for cockpit-client tests."""

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from cockpit_client.config.settings import CockpitConfig, CockpitSettings
from cockpit_client.features.cache import CacheManager, MemoryCacheStore

TEST_ENDPOINT = "https://test.cockpit.com/api/graphql"
TEST_ORIGIN = "https://test.cockpit.com"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that records every request it serves."""
    
    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        
        def _recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)
        
        super().__init__(_recording_handler)


def json_response(body: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with the given JSON body."""
    return lambda request: httpx.Response(status_code, content=json.dumps(body).encode())


@pytest.fixture
def make_http_client():
    """Factory for an httpx client over a recording mock transport."""
    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        return httpx.AsyncClient(transport=transport), transport
    return _make


@pytest.fixture
def empty_settings():
    """Settings with nothing picked up from the environment."""
    return CockpitSettings(
        graphql_endpoint=None,
        secret=None,
        cache_max=None,
        cache_ttl=None,
        default_language=None,
    )


@pytest.fixture
def test_config():
    """Plain configuration without tenant or API key."""
    return CockpitConfig(endpoint=TEST_ENDPOINT)


@pytest.fixture
def memory_store():
    """Fresh bounded memory store."""
    return MemoryCacheStore()


@pytest.fixture
def cache_manager(memory_store):
    """Cache manager using the default endpoint prefix."""
    return CacheManager(memory_store, f"{TEST_ENDPOINT}:default:")


@pytest.fixture
def clean_cockpit_env(monkeypatch):
    """Remove COCKPIT_* variables so settings start empty."""
    import os
    for key in list(os.environ):
        if key.startswith("COCKPIT_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
