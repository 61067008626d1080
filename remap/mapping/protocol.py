"""Mapper protocol.

All mappers implement this interface: map_one for a single record and
map_many for a list of records.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", covariant=True)


@runtime_checkable
class Mapper(Protocol[T]):
    """Base mapper protocol."""

    def map_one(self, row: Any) -> T:
        """Map a single record to a target object."""
        ...

    def map_many(self, rows: list[Any]) -> list[T]:
        """Map multiple records to a list of target objects."""
        ...
