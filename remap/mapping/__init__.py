"""Mapping layer - classify schema actions, build plans, execute them."""

from __future__ import annotations

from remap.mapping.actions import (
    AggregatorAction,
    ClassifiedAction,
    FunctionAction,
    PathAction,
    Selector,
    SelectorAction,
    classify,
)
from remap.mapping.executor import execute
from remap.mapping.mapper import SchemaMapper
from remap.mapping.model import ModelMapper
from remap.mapping.plan import Plan, PlanEntry, build_plan
from remap.mapping.protocol import Mapper

__all__ = [
    "Selector",
    "PathAction",
    "AggregatorAction",
    "FunctionAction",
    "SelectorAction",
    "ClassifiedAction",
    "classify",
    "execute",
    "Plan",
    "PlanEntry",
    "build_plan",
    "SchemaMapper",
    "ModelMapper",
    "Mapper",
]
