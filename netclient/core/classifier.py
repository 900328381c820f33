"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Response classification.

Turns the raw transport outcome into a ``Result`` plus the metadata
gathered so far. The default handler applies five linear steps:

1. transport error        -> Failure(error)
2. no response object     -> Failure(NoResponseError)
3. status not accepted    -> Failure(InvalidStatusCodeError(status))
4. empty body             -> Failure(NoDataError)
5. otherwise              -> Success(body)

A client may install its own :data:`ResponseHandler`, which replaces all
five steps.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Callable, Optional, Tuple

import httpx

from netclient.core.metadata import ResponseMetadata
from netclient.core.result import Failure, Result, Success
from netclient.exceptions import InvalidStatusCodeError, NoDataError, NoResponseError
from netclient.logging_config import get_logger

if TYPE_CHECKING:
    from netclient.core.request import NetworkRequest

logger = get_logger(__name__)


ResponseHandler = Callable[
    [
        "NetworkRequest",
        ResponseMetadata,
        Optional[bytes],
        Optional[httpx.Response],
        Optional[BaseException],
    ],
    Tuple[Result[bytes], ResponseMetadata],
]


def default_response_handler(
    request: NetworkRequest,
    metadata: ResponseMetadata,
    data: Optional[bytes],
    response: Optional[httpx.Response],
    error: Optional[BaseException],
) -> Tuple[Result[bytes], ResponseMetadata]:
    """Classify a transport outcome.

    Args:
        request: The descriptor being executed (provides valid status codes).
        metadata: Metadata accumulated before the transport call.
        data: Raw body bytes, if any.
        response: Raw response object, if any.
        error: Transport-level error, if any.

    Returns:
        ``(result, metadata)`` where metadata now carries response and data.
    """
    metadata = replace(metadata, response=response, data=data)

    if error is not None:
        return Failure(error), metadata

    if response is None:
        return Failure(NoResponseError()), metadata

    if response.status_code not in request.valid_status_codes:
        return Failure(InvalidStatusCodeError(response.status_code)), metadata

    if not data:
        return Failure(NoDataError()), metadata

    return Success(data), metadata


def apply_response_handler(
    handler: ResponseHandler,
    request: NetworkRequest,
    metadata: ResponseMetadata,
    data: Optional[bytes],
    response: Optional[httpx.Response],
    error: Optional[BaseException],
) -> Tuple[Result[bytes], ResponseMetadata]:
    """Run ``handler``, turning an exception it raises into a failure."""
    try:
        return handler(request, metadata, data, response, error)
    except Exception as exc:
        logger.error(f"response handler raised: {exc}", exc_info=True)
        return Failure(exc), replace(metadata, response=response, data=data)
