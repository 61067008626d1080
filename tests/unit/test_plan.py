"""Unit tests for the plan builder."""

from __future__ import annotations

import pytest

from remap.core.exceptions import InvalidSchemaAction
from remap.mapping.actions import AggregatorAction, FunctionAction, PathAction, SelectorAction
from remap.mapping.plan import Plan, build_plan


def _identity(value, *_):
    return value


class TestBuildPlan:
    def test_flat_schema(self) -> None:
        plan = build_plan({"a": "x", "b": "y.z"})
        assert isinstance(plan, Plan)
        assert plan.destinations == ["a", "b"]
        assert plan.entries[1].action == PathAction("y.z")

    def test_preserves_declaration_order(self) -> None:
        plan = build_plan({"z": "a", "m": "b", "a": "c"})
        assert plan.destinations == ["z", "m", "a"]

    def test_nested_schema_flattened(self) -> None:
        plan = build_plan({"out": {"inner": "a"}})
        assert len(plan) == 1
        assert plan.entries[0].destination == ("out", "inner")
        assert plan.entries[0].name == "out.inner"

    def test_nested_entries_spliced_in_place(self) -> None:
        plan = build_plan(
            {
                "first": "a",
                "address": {"city": "c", "geo": {"lat": "lat", "lng": "lng"}},
                "last": "z",
            }
        )
        assert plan.destinations == [
            "first",
            "address.city",
            "address.geo.lat",
            "address.geo.lng",
            "last",
        ]

    def test_all_action_kinds(self) -> None:
        fn = lambda it, src, tgt: None  # noqa: E731
        plan = build_plan(
            {
                "p": "a",
                "agg": ["a", "b"],
                "f": fn,
                "s": {"path": "a", "fn": _identity},
                "n": {"deep": "a"},
            }
        )
        actions = [entry.action for entry in plan.entries]
        assert isinstance(actions[0], PathAction)
        assert isinstance(actions[1], AggregatorAction)
        assert isinstance(actions[2], FunctionAction)
        assert isinstance(actions[3], SelectorAction)
        assert isinstance(actions[4], PathAction)
        assert plan.entries[4].destination == ("n", "deep")

    def test_empty_schema(self) -> None:
        assert len(build_plan({})) == 0

    def test_empty_nested_schema_contributes_nothing(self) -> None:
        plan = build_plan({"a": "x", "empty": {}})
        assert plan.destinations == ["a"]

    def test_dotted_destination_key_is_single_segment(self) -> None:
        plan = build_plan({"a.b": "x"})
        assert plan.entries[0].destination == ("a.b",)

    def test_does_not_call_functions(self, count_calls) -> None:
        fn, calls = count_calls(lambda *args: 1)
        build_plan({"f": fn, "s": {"path": "a", "fn": fn}})
        assert calls == []

    def test_plan_is_frozen(self) -> None:
        plan = build_plan({"a": "x"})
        with pytest.raises(AttributeError):
            plan.entries = ()  # type: ignore[misc]


class TestBuildPlanErrors:
    def test_schema_not_a_mapping(self) -> None:
        with pytest.raises(InvalidSchemaAction, match="schema must be a mapping"):
            build_plan(["a", "b"])  # type: ignore[arg-type]

    def test_invalid_entry_names_destination(self) -> None:
        with pytest.raises(InvalidSchemaAction) as exc_info:
            build_plan({"ok": "a", "profile": {"age": 42}})
        assert exc_info.value.destination == "profile.age"

    def test_non_string_key(self) -> None:
        with pytest.raises(InvalidSchemaAction, match="destination keys must be strings"):
            build_plan({1: "a"})  # type: ignore[dict-item]
