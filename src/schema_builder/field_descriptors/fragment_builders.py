"""Builders turning field options into JSON Schema fragments."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from .fragment_models import NULL_TYPE, JsonSchemaSource

GENERIC_OPTION_NAMES = frozenset({"optional", "nullable"})


class SchemaDefinitionError(Exception):
    """Raised when a schema definition is used in an unsupported way."""


def strip_generic_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return type keywords only, without the builder-level flags."""
    return {
        key: thaw_fragment(value)
        for key, value in options.items()
        if key not in GENERIC_OPTION_NAMES
    }


def or_null(fragment: dict[str, Any], nullable: bool) -> dict[str, Any]:
    """Wrap a fragment so that it also accepts null."""
    if not nullable:
        return fragment
    return {"oneOf": [fragment, {"type": NULL_TYPE}]}


def freeze_fragment(value: Any) -> Any:
    """Return a read-only copy: mappings become proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_fragment(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_fragment(item) for item in value)
    return value


def thaw_fragment(value: Any) -> Any:
    """Return a plain JSON-compatible copy of a frozen fragment."""
    if isinstance(value, Mapping):
        return {key: thaw_fragment(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw_fragment(item) for item in value]
    return value


def primitive_fragment(type_name: str, options: Mapping[str, Any]) -> dict[str, Any]:
    """Fragment for string/number/integer/boolean fields."""
    return {"type": type_name, **strip_generic_options(options)}


def null_fragment(options: Mapping[str, Any]) -> dict[str, Any]:
    """Fragment for a field whose only value is null."""
    return {"type": NULL_TYPE, **strip_generic_options(options)}


def const_fragment(value: Any, options: Mapping[str, Any]) -> dict[str, Any]:
    """Fragment pinning a field to a single value."""
    return {"const": thaw_fragment(value), **strip_generic_options(options)}


def enum_fragment(
    type_name: str, values: Iterable[Any], options: Mapping[str, Any]
) -> dict[str, Any]:
    """Fragment restricting a typed field to a list of values."""
    return {
        "type": type_name,
        "enum": [thaw_fragment(value) for value in values],
        **strip_generic_options(options),
    }


def array_fragment(
    item_type: str,
    item_definition: JsonSchemaSource | Mapping[str, Any] | None,
    array_options: Mapping[str, Any],
) -> dict[str, Any]:
    """Fragment for an array whose items share one type."""
    return {
        "type": "array",
        "items": {"type": item_type, **resolve_definition(item_definition)},
        **strip_generic_options(array_options),
    }


def object_fragment(
    definition: JsonSchemaSource | Mapping[str, Any],
    object_options: Mapping[str, Any],
) -> dict[str, Any]:
    """Fragment for a nested object built from a schema or a raw definition."""
    return {
        "type": "object",
        **resolve_definition(definition),
        **strip_generic_options(object_options),
    }


def resolve_definition(
    definition: JsonSchemaSource | Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Compile a nested definition into plain JSON Schema keywords."""
    if definition is None:
        return {}
    if isinstance(definition, JsonSchemaSource):
        return definition.to_json_schema()
    if isinstance(definition, Mapping):
        return strip_generic_options(definition)
    raise SchemaDefinitionError(
        f"Nested definitions must be mappings or schemas, got {type(definition).__name__}."
    )


def is_nullable_definition(definition: object) -> bool:
    """Return True when a raw nested definition asks to accept null."""
    if isinstance(definition, JsonSchemaSource) or not isinstance(definition, Mapping):
        return False
    return bool(definition.get("nullable", False))
