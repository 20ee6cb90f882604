"""Immutable schema accumulator and its entry points."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from schema_builder.field_descriptors.declarative_fields import (
    FieldDescriptor,
    is_descriptor_mapping,
)
from schema_builder.field_descriptors.fragment_builders import (
    SchemaDefinitionError,
    array_fragment,
    const_fragment,
    enum_fragment,
    freeze_fragment,
    is_nullable_definition,
    null_fragment,
    object_fragment,
    or_null,
    primitive_fragment,
    thaw_fragment,
)
from schema_builder.field_descriptors.fragment_models import JsonSchemaSource, SchemaFragment

from .structural_operators import extend_fields, omit_fields, pick_fields


@dataclass(frozen=True)
class SchemaAccumulator:
    """Object schema built one field at a time.

    Every builder and operator returns a new accumulator; the receiver is
    never modified and stays usable.
    """

    properties: Mapping[str, SchemaFragment] = field(
        default_factory=lambda: MappingProxyType({})
    )
    required: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        frozen = {name: freeze_fragment(fragment) for name, fragment in self.properties.items()}
        object.__setattr__(self, "properties", MappingProxyType(frozen))
        object.__setattr__(self, "required", tuple(self.required))

    def string(
        self, name: str, *, optional: bool = False, nullable: bool = False, **options: Any
    ) -> SchemaAccumulator:
        return self._with_field(
            name, primitive_fragment("string", options), optional=optional, nullable=nullable
        )

    def number(
        self, name: str, *, optional: bool = False, nullable: bool = False, **options: Any
    ) -> SchemaAccumulator:
        return self._with_field(
            name, primitive_fragment("number", options), optional=optional, nullable=nullable
        )

    def integer(
        self, name: str, *, optional: bool = False, nullable: bool = False, **options: Any
    ) -> SchemaAccumulator:
        return self._with_field(
            name, primitive_fragment("integer", options), optional=optional, nullable=nullable
        )

    def boolean(
        self, name: str, *, optional: bool = False, nullable: bool = False, **options: Any
    ) -> SchemaAccumulator:
        return self._with_field(
            name, primitive_fragment("boolean", options), optional=optional, nullable=nullable
        )

    def null(
        self, name: str, *, optional: bool = False, nullable: bool = False, **options: Any
    ) -> SchemaAccumulator:
        # null already is the only accepted value
        del nullable
        return self._with_field(name, null_fragment(options), optional=optional, nullable=False)

    def const(
        self,
        name: str,
        value: Any,
        *,
        optional: bool = False,
        nullable: bool = False,
        **options: Any,
    ) -> SchemaAccumulator:
        return self._with_field(
            name, const_fragment(value, options), optional=optional, nullable=nullable
        )

    def enum(
        self,
        name: str,
        type_name: str,
        values: Iterable[Any],
        *,
        optional: bool = False,
        nullable: bool = False,
        **options: Any,
    ) -> SchemaAccumulator:
        return self._with_field(
            name, enum_fragment(type_name, values, options), optional=optional, nullable=nullable
        )

    def array(
        self,
        name: str,
        item_type: str,
        item_options: Any = None,
        *,
        optional: bool = False,
        nullable: bool = False,
        **array_options: Any,
    ) -> SchemaAccumulator:
        """Add an array field.

        ``item_options`` holds the item keywords; a schema or a mapping of
        field descriptors is compiled into the item definition.
        ``nullable`` applies to the array itself, not to its items.
        """
        fragment = array_fragment(item_type, _coerce_definition(item_options), array_options)
        return self._with_field(name, fragment, optional=optional, nullable=nullable)

    def object(
        self,
        name: str,
        definition: Any,
        *,
        optional: bool = False,
        nullable: bool = False,
        **object_options: Any,
    ) -> SchemaAccumulator:
        """Add a nested object field.

        The field accepts null when ``nullable`` is set here or when a raw
        definition mapping carries its own ``nullable: True``.
        """
        resolved = _coerce_definition(definition)
        if resolved is None:
            raise SchemaDefinitionError(f"Object field '{name}' requires a definition.")
        return self._with_field(
            name,
            object_fragment(resolved, object_options),
            optional=optional,
            nullable=nullable or is_nullable_definition(resolved),
        )

    def pick(self, *names: str) -> SchemaAccumulator:
        properties, required = pick_fields(self.properties, self.required, names)
        return SchemaAccumulator(properties=properties, required=required)

    def omit(self, *names: str) -> SchemaAccumulator:
        properties, required = omit_fields(self.properties, self.required, names)
        return SchemaAccumulator(properties=properties, required=required)

    def extend(self, other: JsonSchemaSource) -> SchemaAccumulator:
        """Merge ``other`` into a new accumulator; ``other`` wins on collisions."""
        properties, required = extend_fields(
            self.properties, self.required, other.to_json_schema()
        )
        return SchemaAccumulator(properties=properties, required=required)

    def identical(self) -> SchemaAccumulator:
        return self

    def to_json_schema(self) -> dict[str, Any]:
        """Compile into a Draft 7 object schema with de-duplicated ``required``."""
        return {
            "type": "object",
            "properties": thaw_fragment(self.properties),
            "required": list(dict.fromkeys(self.required)),
        }

    def _with_field(
        self, name: str, fragment: dict[str, Any], *, optional: bool, nullable: bool
    ) -> SchemaAccumulator:
        if not isinstance(name, str) or not name:
            raise SchemaDefinitionError("Field names must be non-empty strings.")
        required = tuple(entry for entry in self.required if entry != name)
        if not optional:
            required = (*required, name)
        return SchemaAccumulator(
            properties={**self.properties, name: or_null(fragment, nullable)},
            required=required,
        )


def define_schema() -> SchemaAccumulator:
    """Start an empty object schema."""
    return SchemaAccumulator()


def define_object_schema(
    required: Mapping[str, FieldDescriptor],
    optional: Mapping[str, FieldDescriptor] | None = None,
) -> SchemaAccumulator:
    """Build an object schema from required and optional field descriptors."""
    accumulator = define_schema()
    for fields, is_optional in ((required, False), (optional or {}, True)):
        for name, descriptor in fields.items():
            if not isinstance(descriptor, FieldDescriptor):
                raise SchemaDefinitionError(
                    f"Field '{name}' must be declared with a field descriptor."
                )
            accumulator = descriptor.attach(accumulator, name, optional=is_optional)
    return accumulator


def _coerce_definition(definition: Any) -> Any:
    if is_descriptor_mapping(definition):
        return define_object_schema(definition)
    return definition
