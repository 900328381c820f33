"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Mock transport adapter for local testing.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import httpx

from netclient.adapters.base import BaseAdapter, TransportResult


@dataclass
class MockResponse:
    """Canned transport outcome.

    ``status_code=None`` simulates a transport that returns no response
    object; ``error`` simulates a transport failure.
    """
    status_code: Optional[int] = 200
    content: bytes = b""
    json: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    error: Optional[BaseException] = None

    def to_result(self, request: httpx.Request) -> TransportResult:
        if self.error is not None:
            return TransportResult(error=self.error)
        if self.status_code is None:
            return TransportResult(data=self.content or None)

        content = self.content
        headers = dict(self.headers)
        if self.json is not None:
            content = _json.dumps(self.json).encode("utf-8")
            headers.setdefault("Content-Type", "application/json")

        response = httpx.Response(
            self.status_code,
            headers=headers,
            content=content,
            request=request,
        )
        return TransportResult(response=response, data=content)


class MockAdapter(BaseAdapter):
    """In-memory mock adapter for unit tests.

    Args:
        responses: Mapping from ``(method, path)`` tuples to
            ``MockResponse`` instances.

    Example::

        adapter = MockAdapter({
            ("GET", "/get"): MockResponse(status_code=200, json={"args": {}}),
        })
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], MockResponse]] = None,
    ) -> None:
        self._responses: Dict[Tuple[str, str], MockResponse] = responses or {}
        self._sent: list[httpx.Request] = []

    def add(self, method: str, path: str, response: MockResponse) -> None:
        """Register a canned response for ``(method, path)``."""
        self._responses[(method.upper(), path)] = response

    async def send(self, request: httpx.Request) -> TransportResult:
        self._sent.append(request)
        key = (request.method.upper(), request.url.path)
        if key in self._responses:
            return self._responses[key].to_result(request)
        return MockResponse(
            status_code=404,
            json={"error": "not mocked"},
        ).to_result(request)

    def close(self) -> None:
        self._responses.clear()
        self._sent.clear()

    @property
    def sent_requests(self) -> list[httpx.Request]:
        """All requests that have been sent through this adapter."""
        return list(self._sent)
