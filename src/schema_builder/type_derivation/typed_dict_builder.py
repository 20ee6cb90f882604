"""Runtime derivation of typing constructs from compiled schemas.

``pure_type`` mirrors what a valid instance looks like: required fields are
plain keys, optional fields are ``NotRequired`` and nullable fields are
``Optional``. ``dirty_type`` describes input that has not been validated yet:
the same keys, all of them optional and typed as ``object``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal, NotRequired, TypedDict, Union

from schema_builder.field_descriptors.fragment_models import NULL_TYPE, JsonSchemaSource

_PRIMITIVE_TYPES: dict[str, Any] = {
    "string": str,
    "number": float,
    "integer": int,
    "boolean": bool,
    NULL_TYPE: type(None),
}
_LITERAL_VALUE_TYPES = (str, int, bool, type(None))


def pure_type(schema: JsonSchemaSource, name: str = "Pure") -> Any:
    """Return the type a valid instance of ``schema`` has."""
    return _fragment_type(schema.to_json_schema(), name)


def dirty_type(schema: JsonSchemaSource, name: str = "Dirty") -> Any:
    """Return a ``TypedDict`` accepting any value under the schema's keys."""
    keys = _property_names(schema.to_json_schema())
    return TypedDict(name, {key: NotRequired[object] for key in keys})  # type: ignore[misc]


def _fragment_type(fragment: Mapping[str, Any], name: str) -> Any:
    if "oneOf" in fragment:
        return _union_type(fragment["oneOf"], name)
    if "const" in fragment:
        return _literal_type((fragment["const"],))
    if "enum" in fragment:
        return _literal_type(tuple(fragment["enum"]))

    type_name = fragment.get("type")
    if type_name == "array":
        items = fragment.get("items")
        item_type = _fragment_type(items, f"{name}Item") if isinstance(items, Mapping) else Any
        return list[item_type]  # type: ignore[valid-type]
    if type_name == "object":
        return _object_type(fragment, name)
    if isinstance(type_name, str) and type_name in _PRIMITIVE_TYPES:
        return _PRIMITIVE_TYPES[type_name]
    return Any


def _object_type(fragment: Mapping[str, Any], name: str) -> Any:
    properties = fragment.get("properties")
    if not isinstance(properties, Mapping):
        return dict[str, Any]
    required = set(fragment.get("required") or ())
    fields: dict[str, Any] = {}
    for key, child in properties.items():
        child_type = _fragment_type(child, f"{name}{key[:1].upper()}{key[1:]}")
        fields[key] = child_type if key in required else NotRequired[child_type]
    return TypedDict(name, fields)  # type: ignore[misc]


def _union_type(branches: Sequence[Mapping[str, Any]], name: str) -> Any:
    non_null = [branch for branch in branches if branch.get("type") != NULL_TYPE]
    members = []
    for index, branch in enumerate(branches):
        if branch.get("type") == NULL_TYPE:
            members.append(type(None))
            continue
        branch_name = name if len(non_null) == 1 else f"{name}Variant{index + 1}"
        members.append(_fragment_type(branch, branch_name))
    if len(members) == 1:
        return members[0]
    return Union[tuple(members)]  # noqa: UP007


def _literal_type(values: tuple[Any, ...]) -> Any:
    if not values or not all(isinstance(value, _LITERAL_VALUE_TYPES) for value in values):
        return Any
    return Literal[values]


def _property_names(document: Mapping[str, Any]) -> list[str]:
    if "oneOf" in document:
        names: dict[str, None] = {}
        for branch in document["oneOf"]:
            names.update(dict.fromkeys(_property_names(branch)))
        return list(names)
    properties = document.get("properties")
    return list(properties) if isinstance(properties, Mapping) else []
