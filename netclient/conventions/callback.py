"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Completion-callback calling convention.

When an event loop is running in the calling thread the request is
scheduled on it. Otherwise it runs on its own daemon thread with a private
event loop, and ``completion`` is invoked from that thread.
"""

from __future__ import annotations

import asyncio
import threading
from typing import TYPE_CHECKING, Any, Callable, Optional, Set

from netclient.core.decoders import (
    Decoder,
    MappableType,
    decode_data,
    decode_json,
    decode_void,
    mappable_array_decoder,
    mappable_decoder,
    typed_decoder,
)
from netclient.core.metadata import ResponseMetadata
from netclient.core.result import Failure, Result
from netclient.logging_config import get_logger

if TYPE_CHECKING:
    from netclient.core.request import NetworkRequest

logger = get_logger(__name__)

Completion = Callable[[Result[Any], Optional[ResponseMetadata]], None]

# Strong references to in-flight tasks; the event loop only keeps weak ones.
_pending_tasks: Set[asyncio.Task] = set()


def dispatch(request: NetworkRequest, decoder: Decoder, completion: Completion) -> None:
    """Start ``request`` and deliver its outcome to ``completion`` once."""

    async def operation() -> None:
        try:
            result, metadata = await request.perform(decoder)
        except Exception as exc:
            logger.error(f"{request!r} raised instead of failing: {exc}", exc_info=True)
            result, metadata = Failure(exc), ResponseMetadata()
        try:
            completion(result, metadata)
        except Exception as exc:
            logger.error(f"completion handler for {request!r} raised: {exc}", exc_info=True)

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop is not None:
        task = loop.create_task(operation())
        _pending_tasks.add(task)
        task.add_done_callback(_pending_tasks.discard)
        return

    thread = threading.Thread(
        target=asyncio.run,
        args=(operation(),),
        name=f"netclient-{request.method.value}",
        daemon=True,
    )
    thread.start()


class CallbackConvention:
    """``response_*`` variants delivering ``(result, metadata)`` to a callback."""

    def __init__(self, request: NetworkRequest) -> None:
        self._request = request

    def response_data(self, completion: Completion) -> None:
        dispatch(self._request, decode_data, completion)

    def response_void(self, completion: Completion) -> None:
        dispatch(self._request, decode_void, completion)

    def response_json(self, completion: Completion) -> None:
        dispatch(self._request, decode_json, completion)

    def response_decodable(self, type_: Any, completion: Completion) -> None:
        dispatch(self._request, typed_decoder(type_), completion)

    def response_mappable(self, cls: MappableType, completion: Completion) -> None:
        dispatch(self._request, mappable_decoder(cls), completion)

    def response_mappable_array(self, cls: MappableType, completion: Completion) -> None:
        dispatch(self._request, mappable_array_decoder(cls), completion)
