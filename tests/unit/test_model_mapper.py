"""Unit tests for ModelMapper and target-type transforms."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ValidationError

from remap.core.engine import Engine
from remap.core.exceptions import TargetConstructionError
from remap.mapping.model import ModelMapper


@dataclass
class UserDC:
    id: int
    name: str
    email: str


class UserPydantic(BaseModel):
    id: int
    name: str
    email: str


class UserPlain:
    def __init__(self, id: int, name: str, email: str) -> None:
        self.id = id
        self.name = name
        self.email = email


class Address(BaseModel):
    city: str
    zip: str | None = None


class Customer(BaseModel):
    name: str
    address: Address


@dataclass
class GeoDC:
    lat: float
    lng: float


@dataclass
class OfficeDC:
    name: str
    geo: GeoDC
    backup: GeoDC | None = None


@dataclass
class BranchDC:
    code: str
    address: Address


SCHEMA = {
    "id": "user_id",
    "name": lambda it, *_: f"{it['first']} {it['last']}",
    "email": "contact.email",
}

ROW = {"user_id": 1, "first": "Ada", "last": "Lovelace", "contact": {"email": "ada@ex.com"}}


class TestModelMapper:
    def test_map_to_dataclass(self) -> None:
        mapper = ModelMapper(UserDC)
        result = mapper.map_one({"id": 1, "name": "Alice", "email": "alice@ex.com"})
        assert isinstance(result, UserDC)
        assert result.id == 1
        assert result.name == "Alice"

    def test_map_to_pydantic(self) -> None:
        mapper = ModelMapper(UserPydantic)
        result = mapper.map_one({"id": 1, "name": "Alice", "email": "alice@ex.com"})
        assert isinstance(result, UserPydantic)
        assert result.id == 1

    def test_pydantic_type_coercion(self) -> None:
        mapper = ModelMapper(UserPydantic)
        result = mapper.map_one({"id": "42", "name": "Alice", "email": "a@ex.com"})
        assert result.id == 42

    def test_map_to_plain_class(self) -> None:
        mapper = ModelMapper(UserPlain)
        result = mapper.map_one({"id": 1, "name": "Alice", "email": "alice@ex.com"})
        assert isinstance(result, UserPlain)
        assert result.name == "Alice"

    def test_map_many(self) -> None:
        mapper = ModelMapper(UserDC)
        results = mapper.map_many(
            [
                {"id": 1, "name": "Alice", "email": "a@ex.com"},
                {"id": 2, "name": "Bob", "email": "b@ex.com"},
            ]
        )
        assert len(results) == 2
        assert all(isinstance(r, UserDC) for r in results)

    def test_map_many_empty(self) -> None:
        assert ModelMapper(UserDC).map_many([]) == []

    def test_dataclass_constructor_error(self) -> None:
        with pytest.raises(TargetConstructionError) as exc_info:
            ModelMapper(UserDC).map_one({"id": 1, "name": "Alice"})
        assert exc_info.value.target_class == "UserDC"
        assert isinstance(exc_info.value.__cause__, TypeError)
        assert "email" in str(exc_info.value)

    def test_pydantic_validation_error_details(self) -> None:
        with pytest.raises(TargetConstructionError) as exc_info:
            ModelMapper(UserPydantic).map_one({"id": "not-a-number", "name": "A", "email": "e"})
        assert exc_info.value.target_class == "UserPydantic"
        assert len(exc_info.value.details) == 1
        assert exc_info.value.details[0].startswith("id: ")
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_nested_pydantic_error_location(self) -> None:
        with pytest.raises(TargetConstructionError) as exc_info:
            ModelMapper(Customer).map_one({"name": "Ada", "address": {"zip": "1"}})
        assert exc_info.value.details[0].startswith("address.city: ")

    def test_nested_dict_into_nested_dataclass(self) -> None:
        office = ModelMapper(OfficeDC).map_one(
            {"name": "HQ", "geo": {"lat": 51.5, "lng": -0.1}, "backup": {"lat": 1.0, "lng": 2.0}}
        )
        assert office.geo == GeoDC(51.5, -0.1)
        assert office.backup == GeoDC(1.0, 2.0)

    def test_optional_nested_dataclass_accepts_none(self) -> None:
        office = ModelMapper(OfficeDC).map_one({"name": "HQ", "geo": {"lat": 0, "lng": 0}, "backup": None})
        assert office.backup is None

    def test_pydantic_model_inside_dataclass(self) -> None:
        branch = ModelMapper(BranchDC).map_one({"code": "B1", "address": {"city": "Leeds"}})
        assert isinstance(branch.address, Address)
        assert branch.address.city == "Leeds"

    def test_nested_dataclass_error_names_inner_class(self) -> None:
        with pytest.raises(TargetConstructionError) as exc_info:
            ModelMapper(OfficeDC).map_one({"name": "HQ", "geo": {"lat": 1.0}})
        assert exc_info.value.target_class == "GeoDC"

    def test_target_class_property(self) -> None:
        assert ModelMapper(UserDC).target_class is UserDC


class TestTransformIntoType:
    def test_single_record(self, engine: Engine) -> None:
        user = engine.transform(SCHEMA, ROW, UserDC)
        assert user == UserDC(id=1, name="Ada Lovelace", email="ada@ex.com")

    def test_batch(self, engine: Engine) -> None:
        users = engine.transform(SCHEMA, [ROW, ROW], UserPydantic)
        assert [u.name for u in users] == ["Ada Lovelace", "Ada Lovelace"]
        assert all(isinstance(u, UserPydantic) for u in users)

    def test_nested_schema_into_nested_model(self, engine: Engine) -> None:
        schema = {"name": "n", "address": {"city": "loc.city"}}
        customer = engine.transform(schema, {"n": "Ada", "loc": {"city": "London"}}, Customer)
        assert customer.address.city == "London"
        assert customer.address.zip is None

    def test_nested_schema_into_nested_dataclass(self, engine: Engine) -> None:
        schema = {"name": "title", "geo": {"lat": "coords.0", "lng": "coords.1"}}
        office = engine.transform(schema, {"title": "HQ", "coords": [51.5, -0.1]}, OfficeDC)
        assert office == OfficeDC("HQ", GeoDC(51.5, -0.1))

    def test_missing_required_field(self, engine: Engine) -> None:
        with pytest.raises(TargetConstructionError):
            engine.transform({"id": "user_id"}, ROW, UserDC)
