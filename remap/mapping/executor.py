"""Action execution against a single source record."""

from __future__ import annotations

from typing import Any

from remap.core.paths import leaf, resolve
from remap.mapping.actions import (
    AggregatorAction,
    ClassifiedAction,
    FunctionAction,
    PathAction,
    SelectorAction,
)


def _aggregate(action: AggregatorAction, iteratee: Any) -> dict[str, Any]:
    """Resolve every path; missing paths still get a key."""
    return {leaf(path): resolve(iteratee, path) for path in action.paths}


def _select(action: PathAction | AggregatorAction, iteratee: Any) -> Any:
    if isinstance(action, AggregatorAction):
        return _aggregate(action, iteratee)
    return resolve(iteratee, action.path)


def execute(
    action: ClassifiedAction,
    iteratee: Any,
    source: Any,
    target: dict[str, Any],
) -> Any:
    """Compute the value of one destination field.

    Args:
        action: Classified action from a Plan entry.
        iteratee: The record currently being transformed.
        source: The whole input (collection in batch mode, else the record).
        target: The target record built so far.

    Returns:
        The value to assign at the entry's destination.

    Exceptions raised by caller-supplied functions propagate unchanged.
    """
    if isinstance(action, PathAction):
        return resolve(iteratee, action.path)
    if isinstance(action, AggregatorAction):
        return _aggregate(action, iteratee)
    if isinstance(action, FunctionAction):
        return action.fn(iteratee, source, target)
    if isinstance(action, SelectorAction):
        value = _select(action.path, iteratee)
        return action.fn(value, iteratee, source, target)
    raise TypeError(f"Unknown action type: {type(action).__name__}")
