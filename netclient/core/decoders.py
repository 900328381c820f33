"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Response decoders.

Each decoder maps the classified ``Result[bytes]`` of a request into the
shape the caller asked for. Decoders never raise; failures are returned.

JSON and typed decoding surface the parser's own exception
(``json.JSONDecodeError`` / ``pydantic.ValidationError``). Structured
mapping normalizes every failure to :class:`DeserializationError` with the
cause chained.
"""

from __future__ import annotations

import json
from typing import Any, Callable, List, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from netclient.core.mapping import ImmutableMappable, Map, Mappable, MappingError
from netclient.core.result import Failure, Result, Success
from netclient.exceptions import DeserializationError, NoDataError

T = TypeVar("T")
MappableType = Union[Type[Mappable], Type[ImmutableMappable]]

Decoder = Callable[[Result[bytes]], Result[Any]]


def decode_data(result: Result[bytes]) -> Result[bytes]:
    return result


def decode_void(result: Result[bytes]) -> Result[None]:
    """Treat "accepted status, empty body" as success."""
    if isinstance(result, Failure) and not isinstance(result.error, NoDataError):
        return result
    return Success(None)


def decode_json(result: Result[bytes]) -> Result[Any]:
    if isinstance(result, Failure):
        return result
    try:
        return Success(json.loads(result.value))
    except ValueError as exc:
        return Failure(exc)


def typed_decoder(type_: Any) -> Decoder:
    """Build a decoder validating the body as ``type_`` with pydantic.

    ``type_`` may be any type pydantic understands: dataclasses, models,
    ``list[Model]``, ``dict[str, str]`` and so on.
    """
    adapter = TypeAdapter(type_)

    def decode(result: Result[bytes]) -> Result[Any]:
        if isinstance(result, Failure):
            return result
        try:
            return Success(adapter.validate_json(result.value))
        except ValidationError as exc:
            return Failure(exc)

    return decode


def _parse_for_mapping(data: bytes) -> Any:
    try:
        return json.loads(data)
    except ValueError as exc:
        raise DeserializationError(f"Response is not valid JSON: {exc}") from exc


def _build(cls: MappableType, json_object: Any) -> Any:
    try:
        return cls.build(Map(json_object))
    except MappingError as exc:
        raise DeserializationError(f"Could not map {cls.__name__}: {exc}") from exc
    except Exception as exc:
        # User mapping code may fail in any way (IndexError, AttributeError, ...).
        raise DeserializationError(
            f"Could not map {cls.__name__}: {type(exc).__name__}: {exc}"
        ) from exc


def mappable_decoder(cls: MappableType) -> Decoder:
    """Build a decoder constructing one ``cls`` from a JSON object."""

    def decode(result: Result[bytes]) -> Result[Any]:
        if isinstance(result, Failure):
            return result
        try:
            return Success(_build(cls, _parse_for_mapping(result.value)))
        except DeserializationError as exc:
            return Failure(exc)

    return decode


def mappable_array_decoder(cls: MappableType) -> Decoder:
    """Build a decoder constructing a list of ``cls`` from a JSON array.

    One element that cannot be mapped fails the whole array, under both
    mapping conventions.
    """

    def decode(result: Result[bytes]) -> Result[List[Any]]:
        if isinstance(result, Failure):
            return result
        try:
            json_array = _parse_for_mapping(result.value)
            if not isinstance(json_array, list):
                raise DeserializationError(
                    f"Expected a JSON array, got {type(json_array).__name__}"
                )
            return Success([_build(cls, element) for element in json_array])
        except DeserializationError as exc:
            return Failure(exc)

    return decode
