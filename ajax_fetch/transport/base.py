"""Abstract fetch transport interface for ajax-fetch."""

from abc import ABC, abstractmethod
from typing import Any

from ajax_fetch.types import FetchResponse


class FetchTransport(ABC):
    """Abstract fetch-style HTTP transport.

    This abstraction lets ``FetchAdapter`` work across runtime environments:
    - Standard Python (aiohttp or httpx)
    - Cloudflare Workers (JS fetch API)
    """

    @abstractmethod
    async def fetch(self, url: str, options: dict[str, Any]) -> FetchResponse:
        """Issue a request and return the response, whatever its status.

        Args:
            url: The URL to request, query string included.
            options: Translated fetch options (``method``, ``headers``,
                ``body``, ``credentials``).

        Returns:
            The response. Non-2xx statuses are returned, not raised.

        Raises:
            Exception: Whatever the underlying client raises when no response
                is received (connection refused, DNS failure, reset).
        """
        ...

    async def close(self) -> None:
        """Clean up resources. Override if needed."""
        pass

    async def __aenter__(self) -> "FetchTransport":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


def encode_body(body: Any) -> str | bytes | dict[str, Any] | None:
    """Prepare a fetch ``body`` for a Python HTTP client.

    Strings and bytes go out verbatim, dicts are left for the client to
    form-encode, anything else is stringified.
    """
    if body is None or isinstance(body, (str, bytes, dict)):
        return body
    return str(body)
