"""Fetch transport using the JS fetch API for Cloudflare Workers."""

from typing import Any

from ajax_fetch.params import serialize_query_params
from ajax_fetch.types import FetchResponse

from .base import FetchTransport, encode_body


class WorkerFetchTransport(FetchTransport):
    """Fetch transport using the JS fetch API for Cloudflare Workers.

    This transport uses the browser's Fetch API (exposed via JS interop)
    to make HTTP requests without requiring sockets. It is the only transport
    that honors ``credentials``.
    """

    async def fetch(self, url: str, options: dict[str, Any]) -> FetchResponse:
        from js import Object, fetch
        from pyodide.ffi import to_js

        fetch_options: dict[str, Any] = {
            "method": options.get("method") or "GET",
            "headers": options.get("headers") or {},
        }
        if options.get("credentials"):
            fetch_options["credentials"] = options["credentials"]

        body = encode_body(options.get("body"))
        if isinstance(body, dict):
            body = serialize_query_params(body)
        if body is not None:
            fetch_options["body"] = body

        resp = await fetch(url, to_js(fetch_options, dict_converter=Object.fromEntries))

        buffer = await resp.arrayBuffer()
        # Convert JS ArrayBuffer to Python bytes
        content = bytes(buffer.to_py()) if hasattr(buffer, "to_py") else bytes(buffer)

        headers = []
        for entry in resp.headers.entries():
            key, value = entry.to_py() if hasattr(entry, "to_py") else entry
            headers.append((key, value))

        return FetchResponse(
            status=resp.status,
            status_text=resp.statusText,
            headers=headers,
            url=resp.url,
            content=content,
        )
