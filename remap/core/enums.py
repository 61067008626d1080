"""Enumerations used across Remap."""

from __future__ import annotations

from enum import Enum


class ActionKind(Enum):
    """Kind of a classified schema action."""

    PATH = "path"
    FUNCTION = "function"
    AGGREGATOR = "aggregator"
    SELECTOR = "selector"
