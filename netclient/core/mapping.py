"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Structured mapping: declarative object construction from a JSON object.

Two construction conventions are supported, chosen by the base class a
target type derives from:

- :class:`Mappable` is mutable. The object is created first (``create``),
  then its fields are filled leniently by ``mapping``.
- :class:`ImmutableMappable` is immutable. ``from_map`` builds the object in
  one step or raises.

Example::

    class Photo(ImmutableMappable):
        def __init__(self, title: str, url: str) -> None:
            self.title = title
            self.url = url

        @classmethod
        def from_map(cls, map: Map) -> "Photo":
            return cls(title=map.value("title", str), url=map.value("url", str))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from netclient.exceptions import NetClientError

T = TypeVar("T")
M = TypeVar("M", bound="Mappable")
IM = TypeVar("IM", bound="ImmutableMappable")

_MISSING = object()


class MappingError(NetClientError):
    """Raised when a mapped value is missing or has the wrong type."""
    pass


class Map:
    """Read-only view over one JSON object.

    Keys may be dotted paths (``"owner.name"``) to reach nested objects.
    """

    def __init__(self, json: Dict[str, Any]) -> None:
        if not isinstance(json, dict):
            raise MappingError(f"Expected a JSON object, got {type(json).__name__}")
        self.json = json

    def _lookup(self, key: str) -> Any:
        node: Any = self.json
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def __contains__(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value at ``key`` or ``default`` when absent."""
        value = self._lookup(key)
        return default if value is _MISSING else value

    def value(self, key: str, type_: Optional[Type[T]] = None) -> Any:
        """Return the value at ``key``, validated as ``type_`` when given.

        Raises:
            MappingError: If the key is absent or the value does not validate.
        """
        value = self._lookup(key)
        if value is _MISSING:
            raise MappingError(f"Missing value for key '{key}'")
        if type_ is None:
            return value
        try:
            return TypeAdapter(type_).validate_python(value)
        except ValidationError as exc:
            raise MappingError(f"Invalid value for key '{key}': {exc}") from exc


class Mappable(ABC):
    """Mutable mapping convention: construct, then fill fields."""

    @classmethod
    def create(cls: Type[M], map: Map) -> Optional[M]:
        """Create an empty instance, or return ``None`` to refuse ``map``."""
        return cls()

    @abstractmethod
    def mapping(self, map: Map) -> None:
        """Copy values out of ``map`` into this instance."""
        ...

    @classmethod
    def build(cls: Type[M], map: Map) -> M:
        """Build an instance from ``map``.

        Raises:
            MappingError: If ``create`` refuses the map.
        """
        obj = cls.create(map)
        if obj is None:
            raise MappingError(f"{cls.__name__}.create() rejected the mapped object")
        obj.mapping(map)
        return obj


class ImmutableMappable(ABC):
    """Immutable mapping convention: construct atomically or fail."""

    @classmethod
    @abstractmethod
    def from_map(cls: Type[IM], map: Map) -> IM:
        """Build a fully initialized instance.

        Raises:
            MappingError: If a required value is missing or invalid.
        """
        ...

    @classmethod
    def build(cls: Type[IM], map: Map) -> IM:
        return cls.from_map(map)
