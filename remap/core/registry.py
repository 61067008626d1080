"""Mapper registry keyed by target type.

    registry.register(User, {"name": "full_name"})
    registry.map(User, rows)   -> [User(...), ...]

Each target type has at most one mapper. Registration order is preserved.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from remap.core.engine import Engine, default_engine
from remap.core.exceptions import DuplicateMapperError, MapperNotFoundError
from remap.mapping.mapper import SchemaMapper

logger = logging.getLogger(__name__)


class MapperRegistry:
    """Holds one SchemaMapper per target type.

    Args:
        engine: Engine shared by every registered mapper. Defaults to the
                module-level default engine.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or default_engine
        self._mappers: dict[type, SchemaMapper] = {}

    def register(self, target_type: type, schema: Mapping[str, Any]) -> SchemaMapper:
        """Register a schema for ``target_type``.

        Raises:
            DuplicateMapperError: If ``target_type`` is already registered.
            InvalidSchemaAction: If the schema is malformed.
        """
        if target_type in self._mappers:
            raise DuplicateMapperError(target_type)
        return self.set(target_type, schema)

    def set(self, target_type: type, schema: Mapping[str, Any]) -> SchemaMapper:
        """Register or replace the schema for ``target_type``."""
        mapper = SchemaMapper(schema, engine=self._engine, target_type=target_type)
        self._mappers[target_type] = mapper
        logger.debug("Registered mapper for %s", target_type.__name__)
        return mapper

    def get(self, target_type: type) -> SchemaMapper:
        """Look up the mapper for ``target_type``.

        Raises:
            MapperNotFoundError: If nothing is registered for the type.
        """
        try:
            return self._mappers[target_type]
        except KeyError:
            raise MapperNotFoundError(target_type) from None

    def has(self, target_type: type) -> bool:
        """Check if a mapper is registered for ``target_type``."""
        return target_type in self._mappers

    def delete(self, target_type: type) -> None:
        """Remove the mapper for ``target_type``.

        Raises:
            MapperNotFoundError: If nothing is registered for the type.
        """
        if target_type not in self._mappers:
            raise MapperNotFoundError(target_type)
        del self._mappers[target_type]

    def map(self, target_type: type, data: Any) -> Any:
        """Transform ``data`` with the mapper registered for ``target_type``."""
        return self.get(target_type).map(data)

    @property
    def target_types(self) -> list[type]:
        """Registered target types, in registration order."""
        return list(self._mappers)

    def __len__(self) -> int:
        """Number of registered mappers."""
        return len(self._mappers)


default_registry = MapperRegistry()
register = default_registry.register
map_to = default_registry.map
