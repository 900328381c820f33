"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Transport adapters.
"""

from netclient.adapters.base import BaseAdapter, TransportResult
from netclient.adapters.http import HttpAdapter
from netclient.adapters.mock import MockAdapter, MockResponse

__all__ = [
    "BaseAdapter",
    "TransportResult",
    "HttpAdapter",
    "MockAdapter",
    "MockResponse",
]
