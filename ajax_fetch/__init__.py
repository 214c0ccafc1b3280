"""Main entry point for ajax-fetch library."""

from __future__ import annotations

from ajax_fetch.adapter import FetchAdapter
from ajax_fetch.errors import (
    AdapterError,
    AjaxRejection,
    ConflictError,
    ForbiddenError,
    InvalidError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
)
from ajax_fetch.headers import headers_to_object
from ajax_fetch.hooks import AdapterHooks, RESTAdapterHooks
from ajax_fetch.options import mung_options_for_fetch
from ajax_fetch.params import serialize_query_params
from ajax_fetch.transport import FetchTransport, get_default_transport
from ajax_fetch.types import FetchResponse, RequestData

__all__ = [
    # Adapter
    "FetchAdapter",
    "AdapterHooks",
    "RESTAdapterHooks",
    # Helpers
    "serialize_query_params",
    "headers_to_object",
    "mung_options_for_fetch",
    # Transport
    "FetchTransport",
    "get_default_transport",
    # Types
    "FetchResponse",
    "RequestData",
    # Errors
    "AdapterError",
    "AjaxRejection",
    "ConflictError",
    "ForbiddenError",
    "InvalidError",
    "NotFoundError",
    "ServerError",
    "UnauthorizedError",
]
