"""
Two-variant outcome type used to report rule violations as values.

Teaching notes:
- ``Ok`` carries a value, ``Fail`` carries a human-readable message.
- ``chain`` feeds the value of an ``Ok`` into the next step and returns
  that step's outcome as-is; on ``Fail`` the step is never called.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def chain(self, fn: Callable[[T], "Outcome[U]"]) -> "Outcome[U]":
        return fn(self.value)


@dataclass(frozen=True)
class Fail(Generic[T]):
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    def chain(self, fn: Callable[[T], "Outcome[U]"]) -> "Outcome[U]":
        return Fail(self.message)


Outcome = Union[Ok[T], Fail[T]]
