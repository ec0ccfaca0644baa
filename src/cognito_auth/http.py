"""httpx-backed HTTP layer used by providers to reach identity endpoints."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def create_http_client(
    headers: Mapping[str, str] | None = None,
    timeout: httpx.Timeout | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with the package defaults.

    Redirects are followed and a 30 second timeout applies unless
    ``timeout`` is given.
    """
    kwargs: dict[str, object] = {
        "follow_redirects": True,
        "timeout": timeout if timeout is not None else httpx.Timeout(DEFAULT_TIMEOUT),
    }
    if headers is not None:
        kwargs["headers"] = dict(headers)
    return httpx.AsyncClient(**kwargs)  # type: ignore[arg-type]


class HttpxHTTPLayer:
    """HTTP layer that opens a fresh client per request.

    Transport failures (connection errors, timeouts) are raised by httpx and
    propagate unchanged to the caller.
    """

    def __init__(self, client_factory: Callable[[], httpx.AsyncClient] | None = None):
        self._client_factory = client_factory or create_http_client

    async def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> httpx.Response:
        async with self._client_factory() as client:
            resp = await client.get(url, headers=dict(headers or {}))
        logger.debug("GET %s returned %s", url, resp.status_code)
        return resp


__all__ = ["DEFAULT_TIMEOUT", "HttpxHTTPLayer", "create_http_client"]
