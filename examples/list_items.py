import argparse
import asyncio
import json
import logging

import aiohttp

from ajax_fetch import AdapterError, FetchAdapter, RESTAdapterHooks
from ajax_fetch.transport.aiohttp_transport import AioHTTPTransport


async def main(url: str, page: int, token: str | None):
    """Fetch one page of a REST collection and print it."""
    hooks = RESTAdapterHooks(headers={"Authorization": f"Bearer {token}"} if token else None)

    async with AioHTTPTransport() as transport:
        adapter = FetchAdapter(hooks, transport)
        print(f"GET {url} (page {page})")

        try:
            payload = await adapter.ajax(url, "GET", {"data": {"page": {"number": page}}})
        except AdapterError as e:
            print(f"Request failed: {e.message}")
            for error in e.errors:
                print(f"  - {error.get('title')}: {error.get('detail')}")
            return
        except aiohttp.ClientConnectorError as e:
            print(f"Connection error: {e}")
            return

        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="List items from a REST endpoint")
    parser.add_argument("url", help="Collection URL, e.g. http://localhost:8080/api/items")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--token", type=str, default=None)
    parser.add_argument("--verbose", action="store_true", help="Log request dispatch.")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        asyncio.run(main(args.url, args.page, args.token))
    except KeyboardInterrupt:
        print("\nInterrupted.")
