"""Core types for ajax-fetch."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class RequestData:
    """The url/method pair handed to ``handle_response`` for every request."""

    url: str
    method: str


@dataclass
class FetchResponse:
    """A fetch-style response.

    Mirrors the shape of the browser ``Response`` object: a numeric status,
    the status text, a collection of header pairs and a body that is only
    decoded when ``json()`` or ``text()`` is awaited.

    Attributes:
        status: HTTP status code.
        status_text: Reason phrase, or the raw error text for failed requests.
        headers: Header (name, value) pairs in the order they were received.
        url: Final URL of the request.
        content: Raw body bytes.
    """

    status: int
    status_text: str = ""
    headers: list[tuple[str, str]] = field(default_factory=list)
    url: str = ""
    content: bytes = b""

    @property
    def ok(self) -> bool:
        """True for statuses in the 200-299 range."""
        return 200 <= self.status < 300

    async def text(self) -> str:
        return self.content.decode("utf-8")

    async def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            json.JSONDecodeError: If the body is not valid JSON.
        """
        return json.loads(await self.text())
