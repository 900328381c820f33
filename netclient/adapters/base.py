"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Transport adapter base class and data structures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class TransportResult:
    """Raw outcome of one transport call.

    Adapters report transport problems through ``error`` instead of raising.
    """
    response: Optional[httpx.Response] = None
    data: Optional[bytes] = None
    error: Optional[BaseException] = None


class BaseAdapter(ABC):
    """Abstract base for all transport adapters."""

    @abstractmethod
    async def send(self, request: httpx.Request) -> TransportResult:
        """Send exactly one request and report its raw outcome."""
        ...

    def close(self) -> None:
        """Release adapter resources."""
        return None
