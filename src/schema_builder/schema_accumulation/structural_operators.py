"""Structural operators deriving new property maps from existing ones."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from schema_builder.field_descriptors.fragment_builders import SchemaDefinitionError
from schema_builder.field_descriptors.fragment_models import SchemaFragment

PropertyMap = Mapping[str, SchemaFragment]


class UnknownFieldError(SchemaDefinitionError):
    """Raised when an operator names a field the schema does not define."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = tuple(names)
        super().__init__(f"Unknown schema field(s): {', '.join(self.names)}")


def pick_fields(
    properties: PropertyMap, required: Sequence[str], names: Sequence[str]
) -> tuple[dict[str, SchemaFragment], tuple[str, ...]]:
    """Keep only ``names``, in the order they were asked for."""
    missing = [name for name in names if name not in properties]
    if missing:
        raise UnknownFieldError(missing)
    picked = {name: properties[name] for name in names}
    return picked, tuple(name for name in required if name in picked)


def omit_fields(
    properties: PropertyMap, required: Sequence[str], names: Sequence[str]
) -> tuple[dict[str, SchemaFragment], tuple[str, ...]]:
    """Drop ``names``; names the schema does not define are ignored."""
    excluded = set(names)
    kept = {name: fragment for name, fragment in properties.items() if name not in excluded}
    return kept, tuple(name for name in required if name not in excluded)


def extend_fields(
    properties: PropertyMap, required: Sequence[str], other_document: Mapping[str, Any]
) -> tuple[dict[str, SchemaFragment], tuple[str, ...]]:
    """Merge another object schema in; its fragments win on collision.

    The other schema's required names come first.
    """
    other_properties = other_document.get("properties")
    if other_document.get("type") != "object" or not isinstance(other_properties, Mapping):
        raise SchemaDefinitionError("Only object schemas with properties can be used to extend.")
    other_required = other_document.get("required") or ()
    merged = {**properties, **other_properties}
    return merged, (*other_required, *required)
