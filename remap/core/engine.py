"""Transformation engine.

The Engine builds a Plan once per schema object, then executes it against
one record or a list of records. Plans are cached by schema identity: a
structurally equal but distinct schema object gets its own Plan. The cache
is an LRU bounded by EngineConfig.max_cached_plans, so schemas built fresh
per call cannot grow it without limit.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from remap.core.config import EngineConfig
from remap.core.paths import assign
from remap.mapping.executor import execute
from remap.mapping.model import ModelMapper
from remap.mapping.plan import Plan, build_plan

if TYPE_CHECKING:
    from remap.mapping.mapper import SchemaMapper

logger = logging.getLogger(__name__)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _is_batch(data: Any) -> bool:
    return isinstance(data, (list, tuple))


class Engine:
    """Synchronous schema transformation engine.

    Args:
        config: Optional EngineConfig; defaults assign every planned field.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()
        # id(schema) -> (schema, plan); the schema reference keeps the id stable
        self._plans: OrderedDict[int, tuple[Mapping[str, Any], Plan]] = OrderedDict()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: EngineConfig) -> Engine:
        """Create an Engine from an EngineConfig."""
        return cls(config)

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def cache_size(self) -> int:
        """Number of cached plans."""
        return len(self._plans)

    def plan_for(self, schema: Mapping[str, Any]) -> Plan:
        """Return the cached Plan for ``schema``, building it on first use.

        An evicted schema is rebuilt on its next use.

        Raises:
            InvalidSchemaAction: If the schema is malformed.
        """
        key = id(schema)
        with self._lock:
            cached = self._plans.get(key)
            if cached is not None and cached[0] is schema:
                self._plans.move_to_end(key)
                return cached[1]

            plan = build_plan(schema)
            self._plans[key] = (schema, plan)
            self._plans.move_to_end(key)
            logger.debug("Built plan with %d entries: %s", len(plan), plan.destinations)
            while len(self._plans) > self._config.max_cached_plans:
                self._plans.popitem(last=False)
                logger.debug("Evicted least recently used plan")
            return plan

    def clear_cache(self) -> None:
        """Drop every cached plan."""
        with self._lock:
            count = len(self._plans)
            self._plans.clear()
        logger.debug("Cleared %d cached plans", count)

    def mapper(
        self,
        schema: Mapping[str, Any],
        target_type: type | None = None,
    ) -> SchemaMapper:
        """Bind ``schema`` to this engine as a reusable SchemaMapper."""
        from remap.mapping.mapper import SchemaMapper

        return SchemaMapper(schema, engine=self, target_type=target_type)

    def transform(
        self,
        schema: Mapping[str, Any],
        data: Any = MISSING,
        target_type: type | None = None,
    ) -> Any:
        """Transform one record or a list of records.

        Args:
            schema: Mapping of destination keys to action declarations.
            data: A single record, or a list/tuple of records. When omitted,
                a SchemaMapper bound to ``schema`` is returned instead.
            target_type: Optional class each target dict is constructed into.

        Returns:
            A target record for a single record, a list of target records
            (same length and order) for a list.

        Raises:
            InvalidSchemaAction: If the schema is malformed.
            TargetConstructionError: If ``target_type`` cannot be constructed.
        """
        if data is MISSING:
            return self.mapper(schema, target_type)

        return self.apply_plan(self.plan_for(schema), data, target_type)

    def apply_plan(self, plan: Plan, data: Any, target_type: type | None = None) -> Any:
        """Run an already built Plan over one record or a list of records."""
        model = ModelMapper(target_type) if target_type is not None else None

        if _is_batch(data):
            targets = [self.execute_plan(plan, item, data) for item in data]
            return model.map_many(targets) if model is not None else targets

        target = self.execute_plan(plan, data, data)
        return model.map_one(target) if model is not None else target

    def execute_plan(self, plan: Plan, iteratee: Any, source: Any) -> dict[str, Any]:
        """Assemble one target record by running every plan entry in order."""
        skip_none = self._config.skip_none
        none_default = self._config.none_default
        target: dict[str, Any] = {}
        for entry in plan.entries:
            value = execute(entry.action, iteratee, source, target)
            if value is None:
                if skip_none:
                    continue
                value = none_default
            assign(target, entry.destination, value)
        return target


default_engine = Engine()


def transform(
    schema: Mapping[str, Any],
    data: Any = MISSING,
    target_type: type | None = None,
) -> Any:
    """Transform with the module-level default engine.

    See Engine.transform.
    """
    return default_engine.transform(schema, data, target_type)
