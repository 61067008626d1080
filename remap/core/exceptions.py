"""Remap exception hierarchy.

Missing source paths are not errors: they resolve to ``None``. Exceptions
raised by caller-supplied functions are never wrapped and reach the caller
of ``transform`` unchanged.
"""

from __future__ import annotations

from typing import Any


class RemapError(Exception):
    """Base exception for all Remap errors."""


# --- Schema ---


class SchemaError(RemapError):
    """Base for schema definition errors."""


class InvalidSchemaAction(SchemaError):
    """Raised at plan-build time when a schema entry matches no action form."""

    def __init__(self, destination: str, declaration: Any, detail: str) -> None:
        self.destination = destination
        self.declaration = declaration
        super().__init__(f"Invalid action for '{destination}': {detail} (got {declaration!r})")


# --- Mapping ---


class MappingError(RemapError):
    """Base for mapping errors."""


class TargetConstructionError(MappingError):
    """Raised when a target type rejects the fields of a transformed record."""

    def __init__(self, target_class: str, details: list[str]) -> None:
        self.target_class = target_class
        self.details = details
        super().__init__(f"Cannot construct {target_class}: {'; '.join(details)}")


# --- Registry ---


class RegistryError(RemapError):
    """Base for mapper registry errors."""


class MapperNotFoundError(RegistryError):
    """Raised when no mapper is registered for a target type."""

    def __init__(self, target_type: type) -> None:
        self.target_type = target_type
        super().__init__(f"No mapper registered for '{target_type.__name__}'")


class DuplicateMapperError(RegistryError):
    """Raised when registering a second mapper for the same target type."""

    def __init__(self, target_type: type) -> None:
        self.target_type = target_type
        super().__init__(
            f"A mapper for '{target_type.__name__}' is already registered; "
            "use set() to replace it"
        )
