"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from remap.core.engine import Engine


@pytest.fixture
def engine() -> Engine:
    """Fresh engine with its own plan cache."""
    return Engine()


@pytest.fixture
def user_record() -> dict[str, Any]:
    """Nested source record with lists and missing branches."""
    return {
        "id": 7,
        "name": {"first": "Ada", "last": "Lovelace"},
        "contact": {"email": "ada@ex.com", "phones": ["555-0100", "555-0199"]},
        "orders": [
            {"id": 10, "total": 99.5},
            {"id": 11, "total": 12.0},
        ],
        "address": {"city": "London", "zip": None},
    }


@pytest.fixture
def count_calls():
    """Wrap a function and record each call's arguments.

    Usage:
        fn, calls = count_calls(lambda it, src, tgt: it["a"])
    """

    def _wrap(fn):
        calls: list[tuple[Any, ...]] = []

        def wrapper(*args: Any) -> Any:
            calls.append(args)
            return fn(*args)

        return wrapper, calls

    return _wrap
