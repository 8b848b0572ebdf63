"""Async HTTP client used for all backend requests."""

from typing import Any

import httpx
from loguru import logger

from .errors import TransportError


class AsyncHTTPClient:
    """Thin wrapper around httpx.AsyncClient that normalizes transport failures."""

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Prefix for relative request paths
            timeout: Per-request timeout in seconds
            client: Preconfigured httpx client (tests pass one with a mock transport)
        """
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, path: str) -> httpx.Response:
        """Issue a GET request; the response is returned whatever its status."""
        logger.debug(f"GET {path}")
        try:
            return await self._client.get(path)
        except httpx.HTTPError as e:
            raise TransportError(f"GET {path} failed: {e}") from e

    async def post_json(
        self,
        path: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Issue a POST request with a JSON body."""
        logger.debug(f"POST {path}")
        try:
            return await self._client.post(path, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"POST {path} failed: {e}") from e

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
