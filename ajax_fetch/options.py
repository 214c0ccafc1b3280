"""Translation of jQuery.ajax style options into fetch options."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from ajax_fetch.params import serialize_query_params

DEFAULT_CREDENTIALS = "same-origin"
DEFAULT_CONTENT_TYPE = "application/json; charset=utf-8"

# Methods that can't carry a body.
BODYLESS_METHODS = ("GET", "HEAD")


def _has_data(data: Any) -> bool:
    if isinstance(data, Sized):
        return len(data) > 0
    return False


def mung_options_for_fetch(options: dict[str, Any]) -> dict[str, Any]:
    """Translate the options passed to ``ajax`` into what a fetch client expects.

    - ``credentials`` defaults to ``"same-origin"``.
    - ``method`` is taken from ``type`` (or ``method`` when ``type`` is absent).
    - A ``Content-Type`` header is added when ``headers`` is given without one.
    - ``data`` becomes a query string for GET/HEAD and the ``body`` otherwise.
      The body is passed through as is; callers encode it beforehand.

    The caller's dict and its headers are left untouched.
    """
    fetch_options = {"credentials": DEFAULT_CREDENTIALS, **options}

    fetch_options["method"] = fetch_options.get("type") or fetch_options.get("method")

    headers = fetch_options.get("headers")
    if headers is not None:
        headers = dict(headers)
        if "Content-Type" not in headers and "content-type" not in headers:
            headers["Content-Type"] = DEFAULT_CONTENT_TYPE
        fetch_options["headers"] = headers

    data = fetch_options.get("data")
    if _has_data(data):
        if fetch_options["method"] in BODYLESS_METHODS:
            fetch_options["url"] = f"{fetch_options['url']}?{serialize_query_params(data)}"
        else:
            fetch_options["body"] = data

    return fetch_options
