"""FetchAdapter: an ``ajax`` entry point backed by a fetch-style transport."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable

from ajax_fetch.errors import is_adapter_error, raise_rejection
from ajax_fetch.headers import headers_to_object
from ajax_fetch.hooks import AdapterHooks
from ajax_fetch.options import mung_options_for_fetch
from ajax_fetch.transport import FetchTransport, get_default_transport
from ajax_fetch.types import FetchResponse, RequestData

logger = logging.getLogger(__name__)


class FetchAdapter:
    """Runs a data layer's ``ajax`` calls over a fetch-style transport.

    The data layer supplies its hooks (``ajax_options``, ``handle_response``,
    ``parse_error_response``); this class translates the request for the
    transport and feeds the response back through ``handle_response``.

    Example:
        adapter = FetchAdapter(RESTAdapterHooks(headers={"X-Token": "abc"}))
        items = await adapter.ajax("/api/items", "GET", {"data": {"page": 2}})

    Args:
        hooks: The data layer's hooks.
        transport: Transport to send requests with. Defaults to
            ``get_default_transport()``, which the adapter then owns and
            closes in ``close()``.
    """

    def __init__(
        self,
        hooks: AdapterHooks,
        transport: FetchTransport | None = None,
    ) -> None:
        self.hooks = hooks
        self._owns_transport = transport is None
        self.transport = transport or get_default_transport()

    async def close(self) -> None:
        """Close the transport if the adapter created it."""
        if self._owns_transport:
            await self.transport.close()

    async def __aenter__(self) -> "FetchAdapter":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def ajax(
        self, url: str, method: str, options: dict[str, Any] | None = None
    ) -> Any:
        """Make a request and return the value produced by ``handle_response``.

        Raises:
            Exception: The transport's exception when no response arrived.
            AdapterError: Or any other exception ``handle_response`` returns
                for a failed request, or flags on a successful one.
            AjaxRejection: When the failure value is not an exception.
        """
        request_data = RequestData(url=url, method=method)

        request_options = self.hooks.ajax_options(url, method, options)

        try:
            response = await self._ajax_request(request_options)
        except Exception as error:
            logger.debug(f"{method} {url} failed before a response: {error!r}")
            raise_rejection(self.ajax_error(error, None, request_data))

        if response.ok:
            return await self.ajax_success(response, response.json(), request_data)

        logger.debug(f"{method} {url} returned {response.status}")
        raise_rejection(self.ajax_error(None, response, request_data))

    async def _ajax_request(self, options: dict[str, Any]) -> FetchResponse:
        """Translate the options and send them with the transport."""
        fetch_options = mung_options_for_fetch(options)

        logger.debug(f"Fetching {fetch_options.get('method')} {fetch_options.get('url')}")
        return await self.transport.fetch(fetch_options["url"], fetch_options)

    async def ajax_success(
        self,
        response: FetchResponse,
        body: Awaitable[Any],
        request_data: RequestData,
    ) -> Any:
        """Hand a successful response to ``handle_response``.

        Fails with the returned value when it is flagged as an adapter error.
        ``body`` is always consumed: awaited, or closed if the headers can't
        be read.
        """
        try:
            headers = headers_to_object(response.headers)
        except Exception:
            if inspect.iscoroutine(body):
                body.close()
            raise

        payload = await body
        result = self.hooks.handle_response(response.status, headers, payload, request_data)

        if result is not None and is_adapter_error(result):
            logger.debug(
                f"{request_data.method} {request_data.url} flagged as an adapter error"
            )
            raise_rejection(result)
        return result

    def ajax_error(
        self,
        error: Exception | None,
        response: FetchResponse | None,
        request_data: RequestData,
    ) -> Any:
        """Build the error value for a failed request.

        Exceptions raised by the transport are returned unchanged. Otherwise
        the response goes through ``handle_response`` with the payload parsed
        from its status text, or the original ``error`` when there is none.
        """
        if isinstance(error, Exception):
            return error

        try:
            headers = headers_to_object(response.headers)
            return self.hooks.handle_response(
                response.status,
                headers,
                self.hooks.parse_error_response(response.status_text) or error,
                request_data,
            )
        except Exception as e:
            logger.error(
                f"Failed to build error for {request_data.method} {request_data.url}: {e}"
            )
            raise
