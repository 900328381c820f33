"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Request body encoders.

Each body variant turns a logical body into raw bytes plus the single
``Content-Type`` header value that describes them.

Form-urlencoded bodies are joined as ``key=value`` pairs WITHOUT
percent-encoding. Keys or values containing ``&`` or ``=`` therefore
produce an ambiguous body; encode such values before passing them in.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping, Tuple

from pydantic_core import to_json


class HTTPBodyFormat(Enum):
    """Wire format for dictionary bodies."""
    FORM_URLENCODED = "application/x-www-form-urlencoded"
    JSON = "application/json"

    @property
    def header_value(self) -> str:
        """Value sent in the ``Content-Type`` header."""
        return self.value


class HTTPBody(ABC):
    """Base class for all request bodies."""

    @property
    @abstractmethod
    def content_type(self) -> str:
        """``Content-Type`` header value for this body."""
        ...

    @abstractmethod
    def encode(self) -> bytes:
        """Materialize the body bytes.

        Raises:
            TypeError, ValueError: If the body cannot be serialized.
        """
        ...

    def materialize(self) -> Tuple[bytes, str]:
        """Return ``(body_bytes, content_type)``."""
        return self.encode(), self.content_type


class DictBody(HTTPBody):
    """Body built from a parameter mapping in a chosen format.

    Args:
        parameters: Mapping of body parameters. Iteration order is kept.
        format: Form-urlencoded or JSON.
    """

    def __init__(self, parameters: Mapping[str, Any], format: HTTPBodyFormat) -> None:
        self.parameters = dict(parameters)
        self.format = format

    @property
    def content_type(self) -> str:
        return self.format.header_value

    def encode(self) -> bytes:
        if self.format is HTTPBodyFormat.FORM_URLENCODED:
            return "&".join(
                f"{key}={value}" for key, value in self.parameters.items()
            ).encode("utf-8")
        return json.dumps(self.parameters).encode("utf-8")

    def __repr__(self) -> str:
        return f"DictBody(format={self.format.name}, keys={list(self.parameters)})"


class FormBody(DictBody):
    """Shorthand for a form-urlencoded :class:`DictBody`."""

    def __init__(self, parameters: Mapping[str, Any]) -> None:
        super().__init__(parameters, HTTPBodyFormat.FORM_URLENCODED)


class JSONBody(DictBody):
    """Shorthand for a JSON :class:`DictBody`."""

    def __init__(self, parameters: Mapping[str, Any]) -> None:
        super().__init__(parameters, HTTPBodyFormat.JSON)


class EncodableBody(HTTPBody):
    """JSON body serialized from an arbitrary structured value.

    The value is encoded eagerly, so an unserializable object fails here
    rather than at dispatch time. Dataclasses, pydantic models, mappings,
    sequences and primitives are supported.

    Raises:
        pydantic_core.PydanticSerializationError: If ``obj`` cannot be encoded.
    """

    def __init__(self, obj: Any) -> None:
        self.data = to_json(obj)

    @property
    def content_type(self) -> str:
        return HTTPBodyFormat.JSON.header_value

    def encode(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"EncodableBody({len(self.data)} bytes)"
