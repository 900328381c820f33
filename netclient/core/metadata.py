"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Response metadata and response envelopes.

``ResponseMetadata`` is frozen: the request pipeline derives a new instance
with :func:`dataclasses.replace` each time a field becomes known, so the
object handed to the caller never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

import httpx

T = TypeVar("T")


@dataclass(frozen=True)
class ResponseMetadata:
    """Request actually sent, response received and raw body bytes."""
    request: Optional[httpx.Request] = None
    response: Optional[httpx.Response] = None
    data: Optional[bytes] = None

    @property
    def status_code(self) -> Optional[int]:
        """Status code of the received response, if any."""
        if self.response is None:
            return None
        return self.response.status_code


@dataclass(frozen=True)
class NetworkResponse(Generic[T]):
    """Decoded value paired with the metadata of the request that produced it.

    ``value`` is ``bytes`` for data responses, ``None`` for void responses,
    the parsed JSON value for JSON responses and the decoded object for
    typed and mapped responses.
    """
    value: T
    metadata: Optional[ResponseMetadata] = None
