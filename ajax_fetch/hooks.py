"""Adapter hooks consumed by FetchAdapter."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

from ajax_fetch.errors import (
    AdapterError,
    ConflictError,
    ForbiddenError,
    InvalidError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
)
from ajax_fetch.types import RequestData


@runtime_checkable
class AdapterHooks(Protocol):
    """The three hooks a data layer supplies to ``FetchAdapter``.

    Implement this protocol to plug a data layer into the fetch transport.

    Example:
        class ItemsHooks:
            def ajax_options(self, url, method, options):
                return {"url": url, "type": method, **(options or {})}

            def handle_response(self, status, headers, payload, request_data):
                if 200 <= status < 300:
                    return payload
                return AdapterError(message=f"{status} from {request_data.url}")

            def parse_error_response(self, response_text):
                return None
    """

    def ajax_options(
        self, url: str, method: str, options: dict[str, Any] | None
    ) -> dict[str, Any]:
        """Build the request options for a call."""
        ...

    def handle_response(
        self,
        status: int,
        headers: dict[str, str],
        payload: Any,
        request_data: RequestData,
    ) -> Any:
        """Turn a response into the value (or error value) of the call."""
        ...

    def parse_error_response(self, response_text: str) -> Any:
        """Extract an error payload from the text of a failed response."""
        ...


# Status code -> error class for failed requests.
_ERRORS_BY_STATUS: dict[int, type[AdapterError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


class RESTAdapterHooks:
    """Default REST adapter behavior for ``FetchAdapter``.

    Subclass and override any hook or predicate to customize it.

    Args:
        headers: Headers sent with every request (e.g. auth tokens).
    """

    def __init__(self, headers: dict[str, str] | None = None) -> None:
        self.headers = headers or {}

    def ajax_options(
        self, url: str, method: str, options: dict[str, Any] | None
    ) -> dict[str, Any]:
        request_options = dict(options or {})
        request_options["url"] = url
        request_options["type"] = method
        request_options["dataType"] = "json"

        if request_options.get("data") is not None and method != "GET":
            request_options["contentType"] = "application/json; charset=utf-8"
            request_options["data"] = json.dumps(request_options["data"])

        if self.headers:
            request_options["headers"] = {**(request_options.get("headers") or {}), **self.headers}

        return request_options

    def is_success(self, status: int, headers: dict[str, str], payload: Any) -> bool:
        return 200 <= status < 300 or status == 304

    def is_invalid(self, status: int, headers: dict[str, str], payload: Any) -> bool:
        return status == 422

    def handle_response(
        self,
        status: int,
        headers: dict[str, str],
        payload: Any,
        request_data: RequestData,
    ) -> Any:
        """Return the payload on success, otherwise an ``AdapterError``.

        A 422 becomes ``InvalidError`` carrying the payload's ``errors``.
        Other failures are mapped to a status-specific error class, with the
        payload's errors when it has them, or a generated description of the
        request otherwise.
        """
        if self.is_success(status, headers, payload):
            return payload

        if self.is_invalid(status, headers, payload):
            errors = payload.get("errors") if isinstance(payload, dict) else None
            return InvalidError(errors)

        error_class = _ERRORS_BY_STATUS.get(status)
        if error_class is None:
            error_class = ServerError if status >= 500 else AdapterError

        errors = self.normalize_error_response(status, headers, payload)
        message = self.generated_detailed_message(status, headers, payload, request_data)
        return error_class(errors, message)

    def normalize_error_response(
        self, status: int, headers: dict[str, str], payload: Any
    ) -> list[dict[str, Any]]:
        if isinstance(payload, dict) and isinstance(payload.get("errors"), list):
            return payload["errors"]
        return [
            {
                "status": str(status),
                "title": "The backend responded with an error",
                "detail": "" if payload is None else str(payload),
            }
        ]

    def generated_detailed_message(
        self,
        status: int,
        headers: dict[str, str],
        payload: Any,
        request_data: RequestData,
    ) -> str:
        content_type = headers.get("Content-Type") or headers.get("content-type") or "Empty Content-Type"
        if content_type == "text/html" and isinstance(payload, str) and len(payload) > 250:
            payload_description = "[Omitted Lengthy HTML]"
        else:
            payload_description = str(payload)

        return "\n".join(
            [
                f"Request {request_data.method} {request_data.url} returned a {status}",
                f"Payload ({content_type})",
                payload_description,
            ]
        )

    def parse_error_response(self, response_text: str) -> Any:
        """Decode the text as JSON, falling back to the raw text."""
        try:
            return json.loads(response_text)
        except (TypeError, ValueError):
            return response_text
