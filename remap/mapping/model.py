"""Target-type construction from transformed records.

The engine produces nested dicts: a nested schema such as
``{"address": {"city": "loc.city"}}`` yields ``{"address": {"city": ...}}``.
ModelMapper turns those dicts into instances of a target class:

- Pydantic models validate the whole dict, so nested dicts become nested
  models through the model's own field annotations (with lax coercion).
- Dataclasses are built field by field. A nested dict whose field is
  annotated with a dataclass or Pydantic model (optionally ``X | None``) is
  built into that type first, recursively.
- Any other class is called with the dict as keyword arguments.
"""

from __future__ import annotations

import dataclasses
import typing
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from remap.core.exceptions import TargetConstructionError

T = TypeVar("T")


def _is_model(cls: Any) -> bool:
    return isinstance(cls, type) and issubclass(cls, BaseModel)


def _nested_type(annotation: Any) -> type | None:
    """Return the dataclass or model type a field expects, if any.

    ``Address``, ``Address | None`` and ``Optional[Address]`` all give
    ``Address``; unions of several classes give None.
    """
    if _is_model(annotation) or (
        isinstance(annotation, type) and dataclasses.is_dataclass(annotation)
    ):
        return annotation
    candidates = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
    if len(candidates) == 1:
        return _nested_type(candidates[0])
    return None


def _field_types(cls: type) -> dict[str, type]:
    """Map dataclass field names to nested target types."""
    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError):
        # Unresolvable forward references: build the dataclass flat.
        return {}
    nested: dict[str, type] = {}
    for f in dataclasses.fields(cls):
        target = _nested_type(hints.get(f.name))
        if target is not None:
            nested[f.name] = target
    return nested


def _build(cls: type, fields: dict[str, Any]) -> Any:
    if _is_model(cls):
        try:
            return cls.model_validate(fields)  # type: ignore[attr-defined]
        except ValidationError as e:
            raise TargetConstructionError(
                cls.__name__,
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()],
            ) from e

    if dataclasses.is_dataclass(cls):
        fields = dict(fields)
        for name, nested in _field_types(cls).items():
            value = fields.get(name)
            if isinstance(value, dict):
                fields[name] = _build(nested, value)

    try:
        return cls(**fields)
    except TypeError as e:
        raise TargetConstructionError(cls.__name__, [str(e)]) from e


class ModelMapper(Generic[T]):
    """Build instances of ``target_class`` from transformed records.

    Args:
        target_class: A Pydantic model, a dataclass or a plain class whose
            constructor accepts the target fields as keyword arguments.

    Raises:
        TargetConstructionError: From map_one/map_many when the class rejects
            the fields (validation error, missing or unexpected argument).
    """

    def __init__(self, target_class: type[T]) -> None:
        self._target_class = target_class

    @property
    def target_class(self) -> type[T]:
        return self._target_class

    def map_one(self, row: dict[str, Any]) -> T:
        """Construct one target_class instance from a nested target dict."""
        return _build(self._target_class, row)  # type: ignore[no-any-return]

    def map_many(self, rows: list[dict[str, Any]]) -> list[T]:
        return [self.map_one(row) for row in rows]
