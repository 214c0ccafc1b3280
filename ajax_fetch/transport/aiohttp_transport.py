"""Fetch transport using aiohttp for standard Python environments."""

from typing import Any

import aiohttp

from ajax_fetch.types import FetchResponse

from .base import FetchTransport, encode_body


class AioHTTPTransport(FetchTransport):
    """Fetch transport using aiohttp for standard Python environments.

    This is the default transport for local development, servers, and any
    standard Python environment with socket support. ``credentials`` has no
    aiohttp counterpart; cookies live in the session's cookie jar.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None) -> None:
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def fetch(self, url: str, options: dict[str, Any]) -> FetchResponse:
        """Make a request and return the buffered response."""
        session = await self._get_session()
        async with session.request(
            options.get("method") or "GET",
            url,
            headers=options.get("headers"),
            data=encode_body(options.get("body")),
        ) as resp:
            content = await resp.read()
            return FetchResponse(
                status=resp.status,
                status_text=resp.reason or "",
                headers=list(resp.headers.items()),
                url=str(resp.url),
                content=content,
            )

    async def close(self) -> None:
        """Close the aiohttp session if we created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            self._session = None
