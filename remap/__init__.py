"""Remap - declarative schema-driven record transformation."""

from __future__ import annotations

from remap.core.config import EngineConfig
from remap.core.engine import MISSING, Engine, default_engine, transform
from remap.core.enums import ActionKind
from remap.core.exceptions import (
    DuplicateMapperError,
    InvalidSchemaAction,
    MapperNotFoundError,
    MappingError,
    RegistryError,
    RemapError,
    SchemaError,
    TargetConstructionError,
)
from remap.core.paths import resolve
from remap.core.registry import MapperRegistry, default_registry, map_to, register
from remap.mapping.actions import Selector
from remap.mapping.mapper import SchemaMapper
from remap.mapping.model import ModelMapper
from remap.mapping.plan import Plan, PlanEntry, build_plan

__all__ = [
    # Engine
    "Engine",
    "EngineConfig",
    "default_engine",
    "transform",
    "MISSING",
    # Schema
    "Selector",
    "ActionKind",
    "Plan",
    "PlanEntry",
    "build_plan",
    "resolve",
    # Mapping
    "SchemaMapper",
    "ModelMapper",
    # Registry
    "MapperRegistry",
    "default_registry",
    "register",
    "map_to",
    # Exceptions
    "RemapError",
    "SchemaError",
    "InvalidSchemaAction",
    "MappingError",
    "TargetConstructionError",
    "RegistryError",
    "MapperNotFoundError",
    "DuplicateMapperError",
]
