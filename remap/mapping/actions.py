"""Schema actions and their classification.

A schema maps destination keys to action declarations. Each declaration
takes one of five shapes, checked in this order:

1. ``str``                      -> PathAction
2. list/tuple of ``str``        -> AggregatorAction
3. callable                     -> FunctionAction
4. ``{"path": ..., "fn": ...}``  -> SelectorAction (also any object with
   ``path`` and ``fn`` attributes, e.g. ``Selector``)
5. any other mapping            -> nested schema

Classification depends only on the declaration's shape, never on data.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from remap.core.enums import ActionKind
from remap.core.exceptions import InvalidSchemaAction


@dataclass(frozen=True)
class Selector:
    """Declaration helper for a path + function pair.

    Equivalent to ``{"path": path, "fn": fn}`` in a schema.
    """

    path: str | Sequence[str]
    fn: Callable[..., Any]


@dataclass(frozen=True)
class PathAction:
    """Read a dotted path from the current record."""

    path: str
    kind: ClassVar[ActionKind] = ActionKind.PATH


@dataclass(frozen=True)
class AggregatorAction:
    """Read several paths into a dict keyed by each path's leaf segment."""

    paths: tuple[str, ...]
    kind: ClassVar[ActionKind] = ActionKind.AGGREGATOR


@dataclass(frozen=True)
class FunctionAction:
    """Call ``fn(iteratee, source, target)``."""

    fn: Callable[..., Any]
    kind: ClassVar[ActionKind] = ActionKind.FUNCTION


@dataclass(frozen=True)
class SelectorAction:
    """Resolve ``path`` then call ``fn(value, iteratee, source, target)``."""

    path: PathAction | AggregatorAction
    fn: Callable[..., Any]
    kind: ClassVar[ActionKind] = ActionKind.SELECTOR


ClassifiedAction = Union[PathAction, AggregatorAction, FunctionAction, SelectorAction]


def _is_aggregator(declaration: Any) -> bool:
    return isinstance(declaration, (list, tuple)) and all(
        isinstance(item, str) for item in declaration
    )


def _selector_parts(declaration: Any) -> tuple[Any, Any] | None:
    """Return (path, fn) if the declaration has selector shape."""
    if isinstance(declaration, Mapping):
        if "path" in declaration and "fn" in declaration:
            return declaration["path"], declaration["fn"]
        return None
    if hasattr(declaration, "path") and hasattr(declaration, "fn"):
        return declaration.path, declaration.fn
    return None


def _classify_path(declaration: Any, destination: str) -> PathAction | AggregatorAction:
    if isinstance(declaration, str):
        return PathAction(declaration)
    if _is_aggregator(declaration):
        return AggregatorAction(tuple(declaration))
    raise InvalidSchemaAction(
        destination,
        declaration,
        "selector path must be a string or a list of strings",
    )


def classify(declaration: Any, destination: str = "<root>") -> ClassifiedAction | Mapping:
    """Classify one schema declaration.

    Args:
        declaration: The value declared for a destination key.
        destination: Dotted destination name, used in error messages.

    Returns:
        A classified action, or the declaration itself when it is a nested
        schema (flattened by the plan builder).

    Raises:
        InvalidSchemaAction: If the declaration matches none of the forms.
    """
    if isinstance(declaration, str):
        return PathAction(declaration)

    if isinstance(declaration, (list, tuple)):
        if not _is_aggregator(declaration):
            raise InvalidSchemaAction(
                destination, declaration, "aggregator items must all be strings"
            )
        return AggregatorAction(tuple(declaration))

    if callable(declaration):
        return FunctionAction(declaration)

    parts = _selector_parts(declaration)
    if parts is not None:
        path, fn = parts
        if not callable(fn):
            raise InvalidSchemaAction(destination, declaration, "selector fn must be callable")
        return SelectorAction(_classify_path(path, destination), fn)

    if isinstance(declaration, Mapping):
        return declaration

    raise InvalidSchemaAction(
        destination,
        declaration,
        "expected a path, a list of paths, a callable, a selector or a nested schema",
    )
