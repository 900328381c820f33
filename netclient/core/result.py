"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Outcome of a request: ``Success(value)`` or ``Failure(error)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        return Success(fn(self.value))


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the classified or underlying error."""
    error: BaseException

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error

    def map(self, fn: Callable[[Any], Any]) -> Failure:
        return self


Result = Union[Success[T], Failure]
