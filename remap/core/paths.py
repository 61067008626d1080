"""Dotted path resolution and assignment.

Source paths are dot-separated strings walked one segment at a time:
    "user.address.city"  -> record["user"]["address"]["city"]
    "orders.0.total"     -> record["orders"][0]["total"]

Destination paths are tuples of key segments produced by the plan builder.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MISSING = object()


def _step(current: Any, segment: str) -> Any:
    """Look up one segment, returning _MISSING instead of raising."""
    if isinstance(current, Mapping):
        return current.get(segment, _MISSING)
    if isinstance(current, (list, tuple)):
        if not (segment.isascii() and segment.isdigit()):
            return _MISSING
        index = int(segment)
        if index >= len(current):
            return _MISSING
        return current[index]
    return _MISSING


def resolve(record: Any, path: str, default: Any = None) -> Any:
    """Read a dotted path out of a nested record.

    Args:
        record: Source value (mappings and lists/tuples are walked).
        path: Dot-separated path, e.g. "a.b.0.c".
        default: Returned when any segment is missing.

    Returns:
        The value at the end of the path, or ``default``.
    """
    current = record
    for segment in path.split("."):
        current = _step(current, segment)
        if current is _MISSING:
            return default
    return current


def leaf(path: str) -> str:
    """Return the final segment of a dotted path."""
    return path.rsplit(".", 1)[-1]


def assign(target: dict[str, Any], destination: tuple[str, ...], value: Any) -> None:
    """Set ``value`` at ``destination`` inside ``target``.

    Intermediate dicts are created as needed. A non-dict value sitting on an
    intermediate segment is replaced by a dict.
    """
    *parents, last = destination
    current = target
    for segment in parents:
        child = current.get(segment)
        if not isinstance(child, dict):
            child = {}
            current[segment] = child
        current = child
    current[last] = value
