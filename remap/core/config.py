"""Engine configuration.

EngineConfig is a Pydantic model; the defaults reproduce the plain
transform contract where every planned field is assigned.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EngineConfig(BaseModel):
    """Configuration for a transformation Engine.

    Attributes:
        skip_none: Leave fields whose value is ``None`` out of the target.
        none_default: Value assigned in place of ``None`` when ``skip_none``
            is false.
        max_cached_plans: Upper bound on cached plans. The least recently
            used plan is evicted once the bound is reached.
    """

    model_config = ConfigDict(frozen=True)

    skip_none: bool = False
    none_default: Any = None
    max_cached_plans: int = Field(default=256, ge=1)
