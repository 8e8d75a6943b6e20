"""Explicit outcome of a fallible directory lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class LookupStatus(str, Enum):
    FOUND = "found"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Result of a lookup that never raises to its consumer.

    ``EMPTY`` is the normal "no data" case; ``FAILED`` carries the error that
    was already logged by whoever produced the result.
    """

    status: LookupStatus
    value: T | None = None
    error: BaseException | None = None

    @classmethod
    def found(cls, value: T) -> "Lookup[T]":
        return cls(LookupStatus.FOUND, value=value)

    @classmethod
    def empty(cls) -> "Lookup[T]":
        return cls(LookupStatus.EMPTY)

    @classmethod
    def failed(cls, error: BaseException) -> "Lookup[T]":
        return cls(LookupStatus.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.status is not LookupStatus.FAILED

    def value_or(self, default: T) -> T:
        if self.status is LookupStatus.FOUND and self.value is not None:
            return self.value
        return default


__all__ = ["Lookup", "LookupStatus"]
