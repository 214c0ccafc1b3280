"""Header normalization for fetch-style responses."""

from __future__ import annotations

from typing import Any, Iterable


def headers_to_object(headers: Iterable[tuple[str, str]] | Any) -> dict[str, str]:
    """Create a plain dict from a response's header collection.

    Accepts an iterable of (name, value) pairs or anything exposing
    ``items()`` (aiohttp's ``CIMultiDictProxy``, ``httpx.Headers``). When a
    name repeats, the last value wins.
    """
    if hasattr(headers, "items"):
        headers = headers.items()
    return {key: value for key, value in headers}
