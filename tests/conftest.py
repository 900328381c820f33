"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Pytest configuration and shared fixtures for NetClient tests.
"""

import json
import tempfile
from pathlib import Path
from typing import Generator
from urllib.parse import parse_qsl

import httpx
import pytest

from netclient.adapters.http import HttpAdapter
from netclient.adapters.mock import MockAdapter
from netclient.client import NetworkClient, reset_default_client
from netclient.core.reachability import NetworkMonitor


ECHO_BASE_URL = "https://postman-echo.com"

PHOTOS = [
    {
        "albumId": 1,
        "id": 1,
        "title": "accusamus beatae ad facilis",
        "url": "https://via.placeholder.com/600/92c952",
        "thumbnailUrl": "https://via.placeholder.com/150/92c952",
    },
    {
        "albumId": 1,
        "id": 2,
        "title": "reprehenderit est deserunt",
        "url": "https://via.placeholder.com/600/771796",
        "thumbnailUrl": "https://via.placeholder.com/150/771796",
    },
]


def echo_handler(request: httpx.Request) -> httpx.Response:
    """
    In-process stand-in for postman-echo.com.

    Routes:
        /get, /post, /put, /delete: echo args, headers and body
        /status/<code>: empty response with that status
        /empty: 200 with no body
        /text: 200 with a non-JSON body
        /photos: JSON array of photo objects
        /photo: a single photo object
    """
    path = request.url.path
    args = dict(request.url.params)
    headers = {key.lower(): value for key, value in request.headers.items()}

    if path.startswith("/status/"):
        return httpx.Response(int(path.rsplit("/", 1)[1]))
    if path == "/empty":
        return httpx.Response(200)
    if path == "/text":
        return httpx.Response(200, content=b"not json at all")
    if path == "/photos":
        return httpx.Response(200, json=PHOTOS)
    if path == "/photo":
        return httpx.Response(200, json=PHOTOS[0])

    if path.lstrip("/") == request.method.lower():
        body = request.content.decode("utf-8")
        payload = {
            "args": args,
            "headers": headers,
            "url": str(request.url),
        }
        if request.method != "GET":
            content_type = headers.get("content-type", "")
            payload["data"] = body
            payload["json"] = json.loads(body) if content_type == "application/json" and body else None
            payload["form"] = dict(parse_qsl(body)) if "x-www-form-urlencoded" in content_type else {}
        return httpx.Response(200, json=payload)

    return httpx.Response(404, json={"error": "not found"})


@pytest.fixture(autouse=True)
def _reset_default_client() -> Generator[None, None, None]:
    """Make sure no test leaks a process-wide default client."""
    reset_default_client()
    yield
    reset_default_client()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def online_monitor() -> NetworkMonitor:
    """Monitor that always reports a reachable network and never probes."""
    return NetworkMonitor(probe=lambda: True)


@pytest.fixture
def offline_monitor() -> NetworkMonitor:
    """Monitor whose state has been checked and found unreachable."""
    monitor = NetworkMonitor(probe=lambda: False)
    monitor.check_now()
    return monitor


@pytest.fixture
def photos() -> list:
    """Photo objects served by the echo service at /photos."""
    return PHOTOS


@pytest.fixture
def echo_transport() -> httpx.MockTransport:
    return httpx.MockTransport(echo_handler)


@pytest.fixture
def echo_client(echo_transport: httpx.MockTransport, online_monitor: NetworkMonitor) -> NetworkClient:
    """Client that talks to the in-process echo service over real httpx."""
    return NetworkClient(
        base_url=ECHO_BASE_URL,
        adapter=HttpAdapter(transport=echo_transport),
        monitor=online_monitor,
    )


@pytest.fixture
def mock_adapter() -> MockAdapter:
    return MockAdapter()


@pytest.fixture
def mock_client(mock_adapter: MockAdapter, online_monitor: NetworkMonitor) -> NetworkClient:
    """Client backed by a :class:`MockAdapter` with no registered responses."""
    return NetworkClient(
        base_url="https://api.example.com",
        adapter=mock_adapter,
        monitor=online_monitor,
    )
