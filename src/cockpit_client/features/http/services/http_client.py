"""HTTP client for Cockpit API requests.

Thin wrapper over ``httpx.AsyncClient`` that attaches the API key header,
maps 404 to ``None``, raises on other failures and passes every successful
JSON body through the response transformer.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from ....config.settings import CockpitConfig
from ....core.exceptions import CockpitHTTPError
from ...transformers.entities.protocols import ResponseTransformer, identity_transformer

logger = logging.getLogger(__name__)

API_KEY_HEADER = "api-Key"


class HttpClient:
    """Authenticated, transforming HTTP client."""
    
    def __init__(
        self,
        config: CockpitConfig,
        transformer: ResponseTransformer = identity_transformer,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize HTTP client.
        
        Args:
            config: Client configuration (API key, admin access)
            transformer: Applied to every successful JSON response
            client: Optional shared httpx client (not closed by ``aclose``)
            timeout: Timeout in seconds for an owned client
        """
        self.config = config
        self.transformer = transformer
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)
    
    @property
    def client(self) -> httpx.AsyncClient:
        return self._client
    
    def build_headers(
        self,
        custom: Optional[Dict[str, str]] = None,
        use_admin_access: Optional[bool] = None,
    ) -> Dict[str, str]:
        """Build headers; a per-request ``use_admin_access`` overrides the config."""
        headers = dict(custom or {})
        should_use_admin = self.config.use_admin_access if use_admin_access is None else use_admin_access
        if should_use_admin and self.config.api_key is not None:
            headers[API_KEY_HEADER] = self.config.api_key
        return headers
    
    async def _send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        use_admin_access: Optional[bool] = None,
        **kwargs: Any,
    ) -> Optional[httpx.Response]:
        """Issue a request; None on 404, CockpitHTTPError on other failures."""
        logger.debug(f"Cockpit: Requesting {method} {url}")
        response = await self._client.request(
            method,
            url,
            headers=self.build_headers(headers, use_admin_access),
            **kwargs,
        )
        if response.status_code == 404:
            return None
        if not response.is_success:
            logger.error(
                f"Cockpit: Error accessing {response.url}",
                extra={"status": response.status_code, "body": response.text},
            )
            raise CockpitHTTPError(str(response.url), response.status_code, response.text)
        return response
    
    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        content: Optional[str] = None,
        use_admin_access: Optional[bool] = None,
    ) -> Optional[Any]:
        """Issue a request and return the transformed JSON body (None on 404)."""
        response = await self._send(method, url, headers, use_admin_access, content=content)
        if response is None:
            return None
        return self.transformer.transform(response.json())
    
    async def fetch(self, url: str, use_admin_access: Optional[bool] = None, headers: Optional[Dict[str, str]] = None) -> Optional[Any]:
        """Make a GET request."""
        return await self.request("GET", url, headers=headers, use_admin_access=use_admin_access)
    
    async def fetch_text(self, url: str, use_admin_access: Optional[bool] = None) -> Optional[str]:
        """Make a GET request and return the raw body text, untransformed."""
        response = await self._send("GET", url, use_admin_access=use_admin_access)
        return None if response is None else response.text
    
    async def post(self, url: str, body: Any, use_admin_access: Optional[bool] = None, headers: Optional[Dict[str, str]] = None) -> Optional[Any]:
        """Make a POST request with a JSON body."""
        return await self.request(
            "POST",
            url,
            headers={"Content-Type": "application/json", **(headers or {})},
            content=json.dumps(body),
            use_admin_access=use_admin_access,
        )
    
    async def post_files(
        self,
        url: str,
        files: List[Tuple[str, Any]],
        use_admin_access: Optional[bool] = None,
    ) -> Optional[Any]:
        """Make a multipart POST request; ``files`` is passed to httpx as is."""
        response = await self._send("POST", url, use_admin_access=use_admin_access, files=files)
        if response is None:
            return None
        return self.transformer.transform(response.json())
    
    async def delete(self, url: str, use_admin_access: Optional[bool] = None) -> Optional[Any]:
        """Make a DELETE request."""
        return await self.request(
            "DELETE",
            url,
            headers={"Content-Type": "application/json"},
            use_admin_access=use_admin_access,
        )
    
    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
