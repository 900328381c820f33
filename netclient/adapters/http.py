"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

HTTP transport adapter (default).
"""

from __future__ import annotations

from typing import Optional

import httpx

from netclient.adapters.base import BaseAdapter, TransportResult
from netclient.logging_config import get_logger

logger = get_logger(__name__)


class HttpAdapter(BaseAdapter):
    """Default HTTP transport using ``httpx.AsyncClient``.

    A fresh client is opened for every call, so the adapter holds no
    connections between requests and can be used from any event loop.
    Timeouts travel on each request's ``timeout`` extension.

    Args:
        transport: Optional custom httpx transport (e.g. ``httpx.MockTransport``).
        follow_redirects: Whether redirects are followed.
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        follow_redirects: bool = True,
    ) -> None:
        self._transport = transport
        self._follow_redirects = follow_redirects

    async def send(self, request: httpx.Request) -> TransportResult:
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                follow_redirects=self._follow_redirects,
            ) as client:
                response = await client.send(request)
        except httpx.HTTPError as exc:
            logger.debug(f"transport error for {request.method} {request.url}: {exc}")
            return TransportResult(error=exc)

        return TransportResult(response=response, data=response.content)
