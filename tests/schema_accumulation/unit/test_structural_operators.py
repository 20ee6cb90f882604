"""Structural operator tests."""

from __future__ import annotations

import pytest
from schema_builder.combination import combine_schema
from schema_builder.field_descriptors import field
from schema_builder.schema_accumulation import (
    SchemaDefinitionError,
    UnknownFieldError,
    define_object_schema,
    define_schema,
)


def _contact_schema():
    return define_object_schema(
        {"name": field.string(), "phoneNumber": field.string(), "age": field.string()}
    )


def test_omit_single_field() -> None:
    schema = define_object_schema({"name": field.string(), "phoneNumber": field.string()})

    assert schema.omit("phoneNumber").to_json_schema() == {
        "type": "object",
        "properties": {"name": {"type": "string"}},
        "required": ["name"],
    }


def test_omit_multiple_fields() -> None:
    assert _contact_schema().omit("phoneNumber", "age").to_json_schema() == {
        "type": "object",
        "properties": {"name": {"type": "string"}},
        "required": ["name"],
    }


def test_omit_ignores_unknown_names() -> None:
    schema = _contact_schema()

    assert schema.omit("missing").to_json_schema() == schema.to_json_schema()


def test_pick_single_field() -> None:
    schema = define_object_schema({"name": field.string(), "phoneNumber": field.string()})

    assert schema.pick("phoneNumber").to_json_schema() == {
        "type": "object",
        "properties": {"phoneNumber": {"type": "string"}},
        "required": ["phoneNumber"],
    }


def test_pick_multiple_fields() -> None:
    assert _contact_schema().pick("name", "phoneNumber").to_json_schema() == {
        "type": "object",
        "properties": {"name": {"type": "string"}, "phoneNumber": {"type": "string"}},
        "required": ["name", "phoneNumber"],
    }


def test_pick_keeps_optional_fields_optional() -> None:
    schema = define_schema().string("name").string("nickname", optional=True)

    assert schema.pick("nickname").to_json_schema()["required"] == []


def test_pick_unknown_name_raises() -> None:
    with pytest.raises(UnknownFieldError, match="missing") as excinfo:
        _contact_schema().pick("name", "missing")

    assert excinfo.value.names == ("missing",)
    assert isinstance(excinfo.value, SchemaDefinitionError)


def test_pick_then_omit_matches_single_pick() -> None:
    schema = _contact_schema()

    assert (
        schema.pick("name", "age").omit("age").to_json_schema()
        == schema.pick("name").to_json_schema()
    )


def test_operators_leave_source_untouched() -> None:
    schema = _contact_schema()

    schema.pick("name")
    schema.omit("name")

    assert list(schema.properties) == ["name", "phoneNumber", "age"]
    assert schema.required == ("name", "phoneNumber", "age")


def test_extend_prefers_other_fragments_and_lists_its_required_first() -> None:
    base = define_schema().string("id").string("x")
    other = define_schema().integer("x").boolean("flag")

    extended = base.extend(other)

    assert extended.to_json_schema() == {
        "type": "object",
        "properties": {
            "id": {"type": "string"},
            "x": {"type": "integer"},
            "flag": {"type": "boolean"},
        },
        "required": ["x", "flag", "id"],
    }
    assert extended.required == ("x", "flag", "id", "x")


def test_extend_rejects_combined_schemas() -> None:
    combined = combine_schema.one_of([define_schema().string("a")])

    with pytest.raises(SchemaDefinitionError, match="Only object schemas"):
        define_schema().extend(combined)
