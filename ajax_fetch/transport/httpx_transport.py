"""Fetch transport using httpx."""

from typing import Any

import httpx

from ajax_fetch.types import FetchResponse

from .base import FetchTransport, encode_body


class HTTPXTransport(FetchTransport):
    """Fetch transport backed by an ``httpx.AsyncClient``.

    Example:
        transport = HTTPXTransport(client=httpx.AsyncClient(base_url="https://api.example.com"))
        response = await transport.fetch("/items", {"method": "GET"})
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def fetch(self, url: str, options: dict[str, Any]) -> FetchResponse:
        client = await self._get_client()
        body = encode_body(options.get("body"))

        request_kwargs: dict[str, Any] = {"headers": options.get("headers")}
        if isinstance(body, dict):
            request_kwargs["data"] = body
        elif body is not None:
            request_kwargs["content"] = body

        resp = await client.request(options.get("method") or "GET", url, **request_kwargs)
        return FetchResponse(
            status=resp.status_code,
            status_text=resp.reason_phrase,
            headers=list(resp.headers.items()),
            url=str(resp.url),
            content=resp.content,
        )

    async def close(self) -> None:
        """Close the underlying client if we own it."""
        if self._owns_client and self._client:
            await self._client.aclose()
            self._client = None
