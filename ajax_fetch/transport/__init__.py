"""Fetch transport abstraction for ajax-fetch.

This module provides a transport layer that abstracts HTTP client implementations,
enabling ajax-fetch to work across different runtime environments:

- Standard Python (aiohttp, or httpx) - for local dev, servers, etc.
- Cloudflare Workers (JS fetch) - no socket support needed

Usage:
    from ajax_fetch.transport import get_default_transport, FetchTransport

    transport = get_default_transport()
    response = await transport.fetch(url, {"method": "GET"})
"""

from .base import FetchTransport

__all__ = ["FetchTransport", "get_default_transport"]


def get_default_transport() -> FetchTransport:
    """Get the appropriate transport for the current environment.

    ``WORKER_RUNTIME=cloudflare`` selects the JS fetch transport. Otherwise
    ``AJAX_FETCH_TRANSPORT`` names the client to use (``aiohttp`` by default,
    or ``httpx``).

    Returns:
        FetchTransport: WorkerFetchTransport for Cloudflare Workers,
                        AioHTTPTransport or HTTPXTransport otherwise.

    Raises:
        ValueError: If ``AJAX_FETCH_TRANSPORT`` names an unknown client.
    """
    import os

    if os.environ.get("WORKER_RUNTIME") == "cloudflare":
        from .worker import WorkerFetchTransport

        return WorkerFetchTransport()

    name = os.environ.get("AJAX_FETCH_TRANSPORT", "aiohttp").lower()

    if name == "aiohttp":
        from .aiohttp_transport import AioHTTPTransport

        return AioHTTPTransport()

    if name == "httpx":
        from .httpx_transport import HTTPXTransport

        return HTTPXTransport()

    raise ValueError(f"Unknown transport: {name}. Available: aiohttp, httpx")
