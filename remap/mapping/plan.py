"""Schema plan data classes and the plan builder.

A Plan is the flattened, executable form of a schema: nested schemas are
expanded into destination paths so that every entry holds exactly one
terminal action. Plans are frozen and never read source data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from remap.core.exceptions import InvalidSchemaAction
from remap.mapping.actions import ClassifiedAction, classify


@dataclass(frozen=True)
class PlanEntry:
    """One destination field and the action producing its value."""

    destination: tuple[str, ...]
    action: ClassifiedAction

    @property
    def name(self) -> str:
        """Dot-joined destination, e.g. "address.city"."""
        return ".".join(self.destination)


@dataclass(frozen=True)
class Plan:
    """Compiled schema: entries in declaration order."""

    entries: tuple[PlanEntry, ...] = field(default_factory=tuple)

    @property
    def destinations(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)


def _flatten(
    schema: Mapping[Any, Any],
    prefix: tuple[str, ...],
    entries: list[PlanEntry],
) -> None:
    """Append entries for ``schema`` under ``prefix``, depth first."""
    for key, declaration in schema.items():
        if not isinstance(key, str):
            raise InvalidSchemaAction(
                ".".join((*prefix, repr(key))), declaration, "destination keys must be strings"
            )
        destination = (*prefix, key)
        classified = classify(declaration, ".".join(destination))
        if isinstance(classified, Mapping):
            _flatten(classified, destination, entries)
        else:
            entries.append(PlanEntry(destination=destination, action=classified))


def build_plan(schema: Mapping[str, Any]) -> Plan:
    """Classify and flatten a schema into a Plan.

    Args:
        schema: Mapping of destination keys to action declarations.

    Returns:
        A frozen Plan.

    Raises:
        InvalidSchemaAction: If the schema or any entry is malformed.
    """
    if not isinstance(schema, Mapping):
        raise InvalidSchemaAction("<root>", schema, "schema must be a mapping")

    entries: list[PlanEntry] = []
    _flatten(schema, (), entries)
    return Plan(entries=tuple(entries))
