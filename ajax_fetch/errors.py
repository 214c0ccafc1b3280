"""Error types for ajax-fetch."""

from __future__ import annotations

from typing import Any, NoReturn


class AdapterError(Exception):
    """A request failed in a way the data layer should surface.

    ``is_adapter_error`` is the marker ``FetchAdapter`` checks to decide that
    a value returned by ``handle_response`` is a failure, even when the HTTP
    exchange itself succeeded.

    Attributes:
        errors: JSON:API style error objects describing the failure.
        message: Human readable summary.
    """

    is_adapter_error = True
    default_message = "Adapter operation failed"

    def __init__(
        self,
        errors: list[dict[str, Any]] | None = None,
        message: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.errors = errors or [{"title": "Adapter Error", "detail": self.message}]
        super().__init__(self.message)


class InvalidError(AdapterError):
    """The server rejected the record as invalid (422)."""

    default_message = "The adapter rejected the commit because it was invalid"


class UnauthorizedError(AdapterError):
    default_message = "The adapter operation is unauthorized"


class ForbiddenError(AdapterError):
    default_message = "The adapter operation is forbidden"


class NotFoundError(AdapterError):
    default_message = "The adapter could not find the resource"


class ConflictError(AdapterError):
    default_message = "The adapter operation failed due to a conflict"


class ServerError(AdapterError):
    default_message = "The adapter operation failed due to a server error"


class AjaxRejection(Exception):
    """Raised when a request fails with a value that is not an exception.

    ``handle_response`` may return any value for a failed request; when it is
    not an exception it is carried here unchanged.
    """

    def __init__(self, reason: Any) -> None:
        self.reason = reason
        super().__init__(f"Request rejected: {reason!r}")


def raise_rejection(reason: Any) -> NoReturn:
    """Raise ``reason`` if it is an exception, otherwise wrap it."""
    if isinstance(reason, BaseException):
        raise reason
    raise AjaxRejection(reason)


def is_adapter_error(value: Any) -> bool:
    """Check a ``handle_response`` result for the adapter error marker."""
    if isinstance(value, dict):
        return bool(value.get("is_adapter_error"))
    return bool(getattr(value, "is_adapter_error", False))
