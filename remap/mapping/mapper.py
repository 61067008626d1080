"""Schema-bound mapper.

A SchemaMapper stores one schema and its Plan and forwards records to the
owning Engine. The Plan is built on construction so schema defects surface
before any record is mapped.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from remap.mapping.model import ModelMapper
from remap.mapping.plan import Plan

if TYPE_CHECKING:
    from remap.core.engine import Engine


class SchemaMapper:
    """Reusable transformation for a fixed schema.

    Args:
        schema: Mapping of destination keys to action declarations.
        engine: Engine owning the plan cache. Defaults to the module-level
                default engine.
        target_type: Optional class each target dict is constructed into.

    Raises:
        InvalidSchemaAction: If the schema is malformed.
    """

    def __init__(
        self,
        schema: Mapping[str, Any],
        engine: Engine | None = None,
        target_type: type | None = None,
    ) -> None:
        if engine is None:
            from remap.core.engine import default_engine

            engine = default_engine
        self._schema = schema
        self._engine = engine
        self._target_type = target_type
        self._model = ModelMapper(target_type) if target_type is not None else None
        self._plan = engine.plan_for(schema)

    @property
    def schema(self) -> Mapping[str, Any]:
        return self._schema

    @property
    def plan(self) -> Plan:
        return self._plan

    @property
    def target_type(self) -> type | None:
        return self._target_type

    def map(self, data: Any) -> Any:
        """Transform a single record or a list of records."""
        return self._engine.apply_plan(self._plan, data, self._target_type)

    __call__ = map

    def map_one(self, row: Any) -> Any:
        """Transform a single record, even if it is itself a list.

        Callables receive ``row`` as both iteratee and source, as with map().
        """
        target = self._engine.execute_plan(self._plan, row, row)
        return self._model.map_one(target) if self._model is not None else target

    def map_many(self, rows: list[Any]) -> list[Any]:
        """Transform a list of records."""
        return self._engine.apply_plan(self._plan, list(rows), self._target_type)
