"""Tests for FieldSpec, ConstraintRegistry, and read_attributes."""

from typing import Optional

import pytest
from pydantic import BaseModel, Field

from fieldcheck.validators.metadata import ConstraintRegistry, FieldSpec, read_attributes
from fieldcheck.validators.models import ConstraintDescriptor

REQUIRED = ConstraintDescriptor(nullable=False)


class Plain:
    def __init__(self, a=None, b=None):
        self.a = a
        self.b = b

    @property
    def broken(self):
        raise RuntimeError("backing store unavailable")


class TestFieldSpec:
    def test_resolved_name_prefers_alias(self) -> None:
        assert FieldSpec(name="a").resolved_name == "a"
        assert FieldSpec(name="a", alias="Alpha").resolved_name == "Alpha"

    def test_read_attribute(self) -> None:
        assert FieldSpec(name="a").read(Plain(a="x")) == "x"

    def test_custom_accessor(self) -> None:
        spec = FieldSpec(name="upper", accessor=lambda t: t.a.upper())
        assert spec.read(Plain(a="x")) == "X"

    def test_failed_read_is_absent(self) -> None:
        assert FieldSpec(name="broken").read(Plain()) is None
        assert FieldSpec(name="missing").read(Plain()) is None
        assert FieldSpec(name="a", accessor=lambda t: 1 / 0).read(Plain()) is None


class TestConstraintRegistry:
    def test_register_and_lookup(self, registry: ConstraintRegistry) -> None:
        fields = [FieldSpec(name="a", descriptor=REQUIRED), FieldSpec(name="b")]
        registry.register(Plain, fields)
        assert registry.is_registered(Plain)
        assert [f.name for f in registry.fields_for(Plain())] == ["a", "b"]

    def test_register_replaces(self, registry: ConstraintRegistry) -> None:
        registry.register(Plain, [FieldSpec(name="a")])
        registry.register(Plain, [FieldSpec(name="b")])
        assert [f.name for f in registry.fields_for(Plain())] == ["b"]

    def test_unregister(self, registry: ConstraintRegistry) -> None:
        registry.register(Plain, [FieldSpec(name="a")])
        registry.unregister(Plain)
        assert not registry.is_registered(Plain)
        assert registry.fields_for(Plain()) == ()

    def test_lookup_is_exact_type(self, registry: ConstraintRegistry) -> None:
        class Child(Plain):
            pass

        registry.register(Plain, [FieldSpec(name="a")])
        assert registry.fields_for(Child()) == ()

    def test_register_model_keeps_declaration_order_alias_and_type(self, registry) -> None:
        class Customer(BaseModel):
            surname: Optional[str] = Field(default=None, alias="lastName")
            age: Optional[int] = None
            notes: str = ""

        registry.register_model(Customer, age=ConstraintDescriptor(min_value=18), surname=REQUIRED)
        specs = registry.fields_for(Customer())
        assert [s.name for s in specs] == ["surname", "age", "notes"]
        assert specs[0].resolved_name == "lastName"
        assert specs[1].declared_type == Optional[int]
        assert specs[2].descriptor is None

    def test_register_model_unknown_field(self, registry) -> None:
        class Customer(BaseModel):
            name: str = ""

        with pytest.raises(ValueError, match="nickname"):
            registry.register_model(Customer, nickname=REQUIRED)

    def test_constrained_decorator_returns_class(self, registry) -> None:
        @registry.constrained(name=REQUIRED)
        class Customer(BaseModel):
            name: str = ""

        assert registry.is_registered(Customer)
        assert Customer(name="x").name == "x"


class TestReadAttributes:
    def test_only_descriptor_bearing_fields_in_order(self, registry) -> None:
        registry.register(Plain, [
            FieldSpec(name="b", descriptor=REQUIRED),
            FieldSpec(name="a"),
            FieldSpec(name="broken", alias="Broken", descriptor=REQUIRED, declared_type=int),
        ])
        readings = list(read_attributes(Plain(a="1", b="2"), registry))
        assert [(r.name, r.value) for r in readings] == [("b", "2"), ("Broken", None)]
        assert readings[1].declared_type is int
        assert readings[1].descriptor is REQUIRED

    def test_failing_own_specs_reads_as_no_fields(self, registry) -> None:
        class Broken:
            def field_specs(self):
                raise RuntimeError("specs unavailable")

        assert registry.fields_for(Broken()) == ()
        assert list(read_attributes(Broken(), registry)) == []
