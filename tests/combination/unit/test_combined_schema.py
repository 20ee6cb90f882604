"""Combined schema tests."""

from __future__ import annotations

import pytest
from schema_builder.combination import CombinedSchema, combine_schema
from schema_builder.field_descriptors import field
from schema_builder.schema_accumulation import SchemaDefinitionError, define_object_schema


def _email_channel():
    return define_object_schema(
        {"type": field.const("email"), "email": field.string(format="email")}
    )


def _webhook_channel():
    return define_object_schema(
        {"type": field.const("webhook"), "endpoint": field.string(format="uri")}
    )


def test_one_of_compiles_branches_in_order() -> None:
    schema = combine_schema.one_of([_email_channel(), _webhook_channel()])

    assert schema.to_json_schema() == {
        "oneOf": [
            {
                "type": "object",
                "properties": {
                    "type": {"const": "email"},
                    "email": {"type": "string", "format": "email"},
                },
                "required": ["type", "email"],
            },
            {
                "type": "object",
                "properties": {
                    "type": {"const": "webhook"},
                    "endpoint": {"type": "string", "format": "uri"},
                },
                "required": ["type", "endpoint"],
            },
        ]
    }


def test_one_of_equals_branch_documents() -> None:
    first, second = _email_channel(), _webhook_channel()

    schema = combine_schema.one_of([second, first])

    assert schema.to_json_schema() == {
        "oneOf": [second.to_json_schema(), first.to_json_schema()]
    }


def test_combined_schemas_can_be_nested() -> None:
    inner = combine_schema.one_of([_email_channel()])

    schema = combine_schema.one_of([inner, _webhook_channel()])

    assert schema.to_json_schema()["oneOf"][0] == {"oneOf": [_email_channel().to_json_schema()]}


def test_combined_schema_has_no_field_builders() -> None:
    schema = combine_schema.one_of([_email_channel()])

    assert isinstance(schema, CombinedSchema)
    for name in ("pick", "omit", "extend", "string"):
        assert not hasattr(schema, name)


def test_one_of_requires_branches() -> None:
    with pytest.raises(SchemaDefinitionError, match="at least one"):
        combine_schema.one_of([])


def test_one_of_rejects_values_without_to_json_schema() -> None:
    with pytest.raises(SchemaDefinitionError, match="Branch 1"):
        combine_schema.one_of([_email_channel(), {"type": "object"}])  # type: ignore[list-item]
