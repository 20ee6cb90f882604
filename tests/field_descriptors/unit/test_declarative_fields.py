"""Declarative field descriptor tests."""

from __future__ import annotations

import pytest
from schema_builder.field_descriptors import FieldKind, SchemaDefinitionError, field
from schema_builder.schema_accumulation import define_schema


def test_descriptor_records_kind_arguments_and_options() -> None:
    descriptor = field.enum("string", ["a", "b"], description="letters")

    assert descriptor.kind == FieldKind.ENUM
    assert descriptor.arguments == ("string", ("a", "b"))
    assert dict(descriptor.options) == {"description": "letters"}
    assert descriptor.is_nullable is False


def test_nullable_returns_new_descriptor() -> None:
    descriptor = field.string()

    nullable_descriptor = descriptor.nullable()

    assert nullable_descriptor.is_nullable is True
    assert descriptor.is_nullable is False


def test_nullable_keyword_is_turned_into_flag() -> None:
    descriptor = field.number(nullable=True, minimum=0)

    assert descriptor.is_nullable is True
    assert dict(descriptor.options) == {"minimum": 0}


def test_with_options_merges_keywords() -> None:
    descriptor = field.string(minLength=1).with_options(maxLength=5)

    assert dict(descriptor.options) == {"minLength": 1, "maxLength": 5}


def test_optional_keyword_is_rejected_with_a_pointer_to_the_optional_mapping() -> None:
    with pytest.raises(SchemaDefinitionError, match="optional mapping of define_object_schema"):
        field.string(optional=True)


def test_with_options_rejects_builder_flags() -> None:
    with pytest.raises(SchemaDefinitionError, match=r"nullable\(\)"):
        field.string().with_options(optional=True)


def test_attach_calls_matching_builder() -> None:
    accumulator = field.const("email").nullable().attach(define_schema(), "kind", optional=True)

    assert accumulator.to_json_schema() == {
        "type": "object",
        "properties": {"kind": {"oneOf": [{"const": "email"}, {"type": "null"}]}},
        "required": [],
    }
