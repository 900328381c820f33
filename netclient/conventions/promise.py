"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Promise calling convention built on :class:`concurrent.futures.Future`.

Plain variants resolve with the decoded value and reject with the original
error. ``*_with_metadata`` variants resolve with ``(value, metadata)`` and
reject with :class:`NetworkResponseError` so the metadata is not lost.

Futures can be awaited from asyncio code with :func:`asyncio.wrap_future`.
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, List, Optional

from netclient.conventions.callback import dispatch
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
from netclient.exceptions import NetworkResponseError

if TYPE_CHECKING:
    from netclient.core.request import NetworkRequest

# Resolves with (value, Optional[ResponseMetadata]).
WithMetadata = Future


def _new_future() -> Future:
    future: Future = Future()
    # A running future cannot be cancelled; the request has no cancellation.
    future.set_running_or_notify_cancel()
    return future


class PromiseConvention:
    """``response_*`` variants returning futures."""

    def __init__(self, request: NetworkRequest) -> None:
        self._request = request

    def _with_metadata(self, decoder: Decoder) -> Future:
        future = _new_future()

        def completion(result: Result[Any], metadata: Optional[ResponseMetadata]) -> None:
            if isinstance(result, Failure):
                future.set_exception(NetworkResponseError(result.error, metadata))
            else:
                future.set_result((result.value, metadata))

        dispatch(self._request, decoder, completion)
        return future

    def _value_only(self, decoder: Decoder) -> Future:
        future = _new_future()

        def completion(result: Result[Any], metadata: Optional[ResponseMetadata]) -> None:
            if isinstance(result, Failure):
                future.set_exception(result.error)
            else:
                future.set_result(result.value)

        dispatch(self._request, decoder, completion)
        return future

    def response_data(self) -> Future[bytes]:
        return self._value_only(decode_data)

    def response_data_with_metadata(self) -> WithMetadata:
        return self._with_metadata(decode_data)

    def response_void(self) -> Future[None]:
        return self._value_only(decode_void)

    def response_void_with_metadata(self) -> WithMetadata:
        return self._with_metadata(decode_void)

    def response_json(self) -> Future[Any]:
        return self._value_only(decode_json)

    def response_json_with_metadata(self) -> WithMetadata:
        return self._with_metadata(decode_json)

    def response_decodable(self, type_: Any) -> Future[Any]:
        return self._value_only(typed_decoder(type_))

    def response_decodable_with_metadata(self, type_: Any) -> WithMetadata:
        return self._with_metadata(typed_decoder(type_))

    def response_mappable(self, cls: MappableType) -> Future[Any]:
        return self._value_only(mappable_decoder(cls))

    def response_mappable_with_metadata(self, cls: MappableType) -> WithMetadata:
        return self._with_metadata(mappable_decoder(cls))

    def response_mappable_array(self, cls: MappableType) -> Future[List[Any]]:
        return self._value_only(mappable_array_decoder(cls))

    def response_mappable_array_with_metadata(self, cls: MappableType) -> WithMetadata:
        return self._with_metadata(mappable_array_decoder(cls))
