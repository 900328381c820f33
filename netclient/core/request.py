"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Request descriptor and the core single-completion operation.

Quick start::

    from netclient import NetworkRequest

    response = await NetworkRequest("https://postman-echo.com/get").response_json()
    print(response.value["url"])

Fluent::

    request = (
        client.request(path="/post")
        .with_method(HTTPMethod.POST)
        .with_body(JSONBody({"name": "value"}))
        .with_headers({"X-Trace": "1"})
    )
    await request.response_void()

Every calling convention funnels into :meth:`NetworkRequest.perform`, which
performs exactly one transport call and always returns a
``(Result, ResponseMetadata)`` pair.
"""

from __future__ import annotations

import time
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Collection, Dict, Mapping, Optional, Tuple, Union

import httpx

from netclient.adapters.base import TransportResult
from netclient.conventions import aio
from netclient.conventions.callback import CallbackConvention
from netclient.conventions.promise import PromiseConvention
from netclient.core.body import HTTPBody
from netclient.core.classifier import apply_response_handler, default_response_handler
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
from netclient.core.metadata import NetworkResponse, ResponseMetadata
from netclient.core.result import Failure, Result
from netclient.core.status import HTTPMethod, HTTPStatusCodes
from netclient.exceptions import (
    InvalidURLError,
    MissingBaseURLError,
    NetworkError,
    NoNetworkConnectionError,
    RequestConfigurationError,
)
from netclient.logging_config import (
    correlation_scope,
    get_logger,
    log_request_completed,
    log_request_dispatched,
)

if TYPE_CHECKING:
    from netclient.client import NetworkClient

logger = get_logger(__name__)


def _decode(decoder: Decoder, result: Result[bytes]) -> Result[Any]:
    try:
        return decoder(result)
    except Exception as exc:
        logger.error(f"decoder raised: {exc}", exc_info=True)
        return Failure(exc)


class NetworkRequest:
    """Description of one HTTP request.

    Exactly one of ``url`` (absolute) or ``path`` (joined to the client's
    base URL at dispatch time) must be given.

    Args:
        url: Absolute request URL.
        path: Path relative to the client's base URL.
        method: HTTP method.
        query_parameters: Query items merged into the URL.
        body: Optional request body.
        headers: Extra headers, applied after the body's ``Content-Type``.
        valid_status_codes: Status codes treated as success.
        client: Client whose configuration is used. Defaults to the
            process-wide default client.

    Raises:
        RequestConfigurationError: If both or neither of ``url``/``path``
            are given.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        path: Optional[str] = None,
        method: Union[HTTPMethod, str] = HTTPMethod.GET,
        query_parameters: Optional[Mapping[str, Any]] = None,
        body: Optional[HTTPBody] = None,
        headers: Optional[Mapping[str, str]] = None,
        valid_status_codes: Collection[int] = HTTPStatusCodes.SUCCESSES,
        client: Optional[NetworkClient] = None,
    ) -> None:
        if (url is None) == (path is None):
            raise RequestConfigurationError(
                "NetworkRequest requires exactly one of url or path."
            )
        self.url = url
        self.path = path
        self.method = HTTPMethod(method.upper() if isinstance(method, str) else method)
        self.query_parameters: Dict[str, Any] = dict(query_parameters or {})
        self.body = body
        self.headers: Dict[str, str] = dict(headers or {})
        self.valid_status_codes = frozenset(valid_status_codes)
        self._client = client
        self._dispatched = False

    def __repr__(self) -> str:
        target = self.url if self.url is not None else f"path={self.path}"
        return f"NetworkRequest({self.method.value} {target})"

    @property
    def client(self) -> NetworkClient:
        """The client this request runs against."""
        if self._client is None:
            from netclient.client import get_default_client
            return get_default_client()
        return self._client

    @property
    def dispatched(self) -> bool:
        return self._dispatched

    # -- Fluent configuration ------------------------------------------------

    def _ensure_mutable(self) -> None:
        if self._dispatched:
            raise RequestConfigurationError(
                f"{self!r} has already been dispatched and can no longer be modified."
            )

    def with_method(self, method: Union[HTTPMethod, str]) -> NetworkRequest:
        self._ensure_mutable()
        self.method = HTTPMethod(method.upper() if isinstance(method, str) else method)
        return self

    def with_query_parameters(self, parameters: Mapping[str, Any]) -> NetworkRequest:
        """Add query items; later values replace earlier ones with the same key."""
        self._ensure_mutable()
        self.query_parameters.update(parameters)
        return self

    def with_body(self, body: Optional[HTTPBody]) -> NetworkRequest:
        """Attach ``body``, replacing any body set before."""
        self._ensure_mutable()
        self.body = body
        return self

    def with_headers(self, headers: Mapping[str, str]) -> NetworkRequest:
        self._ensure_mutable()
        self.headers.update(headers)
        return self

    def with_valid_status_codes(self, status_codes: Collection[int]) -> NetworkRequest:
        self._ensure_mutable()
        self.valid_status_codes = frozenset(status_codes)
        return self

    # -- Materialization -----------------------------------------------------

    def resolve_url(self, client: Optional[NetworkClient] = None) -> httpx.URL:
        """Build the absolute URL including query parameters.

        Raises:
            MissingBaseURLError: If ``path`` is used and no base URL is set.
            InvalidURLError: If the result is not an absolute URL.
        """
        client = client or self.client
        if self.url is not None:
            raw = self.url
        else:
            assert self.path is not None
            base_url = client.resolve_base_url()
            if not base_url:
                raise MissingBaseURLError(self.path)
            raw = f"{base_url.rstrip('/')}/{self.path.lstrip('/')}"

        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as exc:
            raise InvalidURLError(raw) from exc
        if not url.scheme or not url.host:
            raise InvalidURLError(raw)

        if self.query_parameters:
            url = url.copy_merge_params(self.query_parameters)
        return url

    def build_transport_request(self, client: Optional[NetworkClient] = None) -> httpx.Request:
        """Materialize the request the transport will send.

        Raises:
            NetworkError: For URL problems.
            TypeError, ValueError: If the body cannot be serialized.
        """
        client = client or self.client
        url = self.resolve_url(client)

        headers = httpx.Headers()
        content: Optional[bytes] = None
        if self.body is not None:
            content, content_type = self.body.materialize()
            headers["Content-Type"] = content_type
        headers.update(client.default_headers)
        headers.update(self.headers)

        return httpx.Request(
            self.method.value,
            url,
            headers=headers,
            content=content,
            extensions={"timeout": httpx.Timeout(client.timeout).as_dict()},
        )

    # -- Core operation ------------------------------------------------------

    async def perform(self, decoder: Decoder = decode_data) -> Tuple[Result[Any], ResponseMetadata]:
        """Execute the request once and decode its outcome.

        Never raises: every failure, including exceptions raised by the
        base URL provider or by the decoder, is returned as ``Failure``.
        Log events emitted while the request runs share one correlation ID.
        """
        with correlation_scope():
            return await self._perform(decoder)

    async def _perform(self, decoder: Decoder) -> Tuple[Result[Any], ResponseMetadata]:
        self._dispatched = True
        client = self.client
        metadata = ResponseMetadata()

        if not client.monitor.is_connected:
            logger.warning(f"no network connection, skipping {self!r}")
            return _decode(decoder, Failure(NoNetworkConnectionError())), metadata

        try:
            prepared = self.build_transport_request(client)
        except NetworkError as exc:
            logger.warning(f"could not build {self!r}: {exc}")
            return _decode(decoder, Failure(exc)), metadata
        except (TypeError, ValueError) as exc:
            logger.warning(f"could not encode body for {self!r}: {exc}")
            return _decode(decoder, Failure(exc)), metadata
        except Exception as exc:
            logger.error(f"building {self!r} raised: {exc}", exc_info=True)
            return _decode(decoder, Failure(exc)), metadata

        metadata = replace(metadata, request=prepared)
        log_request_dispatched(logger, prepared.method, str(prepared.url))

        start = time.monotonic()
        try:
            outcome = await client.adapter.send(prepared)
        except Exception as exc:
            logger.error(f"transport adapter raised for {self!r}: {exc}", exc_info=True)
            outcome = TransportResult(error=exc)
        duration_ms = round((time.monotonic() - start) * 1000, 2)

        handler = client.response_handler or default_response_handler
        result, metadata = apply_response_handler(
            handler, self, metadata, outcome.data, outcome.response, outcome.error
        )

        log_request_completed(
            logger,
            prepared.method,
            str(prepared.url),
            success=result.is_success,
            duration_ms=duration_ms,
            status_code=metadata.status_code,
            error=None if result.is_success else result.error,
        )
        return _decode(decoder, result), metadata

    # -- async/await convention ---------------------------------------------

    async def response_data(self) -> NetworkResponse[bytes]:
        """Return the raw response bytes."""
        return await aio.respond(self, decode_data)

    async def response_void(self) -> NetworkResponse[None]:
        """Succeed for any accepted status, with or without a body."""
        return await aio.respond(self, decode_void)

    async def response_json(self) -> NetworkResponse[Any]:
        """Return the body parsed as JSON."""
        return await aio.respond(self, decode_json)

    async def response_decodable(self, type_: Any) -> NetworkResponse[Any]:
        """Return the body validated as ``type_`` (dataclass, model, ``list[...]``)."""
        return await aio.respond(self, typed_decoder(type_))

    async def response_mappable(self, cls: MappableType) -> NetworkResponse[Any]:
        """Return one ``cls`` built through structured mapping."""
        return await aio.respond(self, mappable_decoder(cls))

    async def response_mappable_array(self, cls: MappableType) -> NetworkResponse[Any]:
        """Return a list of ``cls`` built through structured mapping."""
        return await aio.respond(self, mappable_array_decoder(cls))

    # -- Other conventions ---------------------------------------------------

    @property
    def callbacks(self) -> CallbackConvention:
        """Completion-callback variants of the ``response_*`` methods."""
        return CallbackConvention(self)

    @property
    def promises(self) -> PromiseConvention:
        """Future-returning variants of the ``response_*`` methods."""
        return PromiseConvention(self)
