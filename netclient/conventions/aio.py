"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

async/await calling convention.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from netclient.core.decoders import Decoder
from netclient.core.metadata import NetworkResponse
from netclient.core.result import Failure
from netclient.exceptions import NetworkResponseError

if TYPE_CHECKING:
    from netclient.core.request import NetworkRequest


async def respond(request: NetworkRequest, decoder: Decoder) -> NetworkResponse[Any]:
    """Await ``request`` and unwrap its decoded result.

    Raises:
        NetworkResponseError: Carrying the original error and the metadata.
    """
    result, metadata = await request.perform(decoder)
    if isinstance(result, Failure):
        raise NetworkResponseError(result.error, metadata) from result.error
    return NetworkResponse(value=result.value, metadata=metadata)
