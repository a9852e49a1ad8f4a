"""HTTP client for the PostgREST-style task store."""

from typing import Any

import httpx

from dayboard_cli.config import ConfigManager, get_config_manager


class APIClient:
    """HTTP client for the task store REST endpoint.

    Requests are sent once; failures surface as httpx exceptions and are not
    retried.
    """

    def __init__(
        self,
        profile: str = "default",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config_manager: ConfigManager = get_config_manager(profile)
        self.config = self.config_manager.config
        self.base_url = self.config_manager.store_url().rstrip("/")
        self.api_key = self.config_manager.store_key()
        self.timeout = self.config.store.timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers with the store key."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=True,
                headers=self._get_headers(),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make an HTTP request to the store and raise on non-2xx status."""
        client = await self._get_client()
        url = f"{path}" if path.startswith("/") else f"/{path}"

        response = await client.request(
            method=method,
            url=url,
            json=json,
            params=params,
            headers=headers,
        )
        response.raise_for_status()
        return response

    async def get(
        self, path: str, *, params: dict[str, Any] | None = None
    ) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        *,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, json=json, headers=headers)

    async def patch(
        self,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Make a PATCH request."""
        return await self.request("PATCH", path, json=json, params=params)

    async def delete(
        self, path: str, *, params: dict[str, Any] | None = None
    ) -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", path, params=params)
