"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

HTTP methods and named status code ranges.
"""

from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP methods supported by :class:`NetworkRequest`."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class HTTPStatusCodes:
    """Named status code ranges, usable as ``valid_status_codes``."""
    INFORMATIONALS = frozenset(range(100, 200))
    SUCCESSES = frozenset(range(200, 300))
    REDIRECTIONS = frozenset(range(300, 400))
    CLIENT_ERRORS = frozenset(range(400, 500))
    SERVER_ERRORS = frozenset(range(500, 600))
