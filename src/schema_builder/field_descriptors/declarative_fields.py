"""Declarative field descriptors used by object-style schema definitions."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Any

from .fragment_builders import GENERIC_OPTION_NAMES, SchemaDefinitionError


class FieldKind(str, Enum):
    """Builder method a descriptor is attached with."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    CONST = "const"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class FieldDescriptor:
    """A field waiting for a name and an accumulator."""

    kind: FieldKind
    arguments: tuple[Any, ...] = ()
    options: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    is_nullable: bool = False

    def nullable(self) -> FieldDescriptor:
        """Return a copy that also accepts null."""
        return replace(self, is_nullable=True)

    def with_options(self, **options: Any) -> FieldDescriptor:
        """Return a copy with extra JSON Schema keywords merged in."""
        flags = sorted(GENERIC_OPTION_NAMES.intersection(options))
        if flags:
            raise SchemaDefinitionError(
                f"with_options() takes JSON Schema keywords only, got {', '.join(flags)}; "
                "use nullable() or the optional mapping of define_object_schema()."
            )
        return replace(self, options=MappingProxyType({**self.options, **options}))

    def attach(self, accumulator: Any, name: str, *, optional: bool) -> Any:
        """Add this field to ``accumulator`` under ``name``."""
        builder = getattr(accumulator, self.kind.value)
        return builder(
            name,
            *self.arguments,
            optional=optional,
            nullable=self.is_nullable,
            **self.options,
        )


class FieldFactory:
    """Entry points for declaring fields, exposed as ``field``."""

    def string(self, **options: Any) -> FieldDescriptor:
        return _descriptor(FieldKind.STRING, (), options)

    def number(self, **options: Any) -> FieldDescriptor:
        return _descriptor(FieldKind.NUMBER, (), options)

    def integer(self, **options: Any) -> FieldDescriptor:
        return _descriptor(FieldKind.INTEGER, (), options)

    def boolean(self, **options: Any) -> FieldDescriptor:
        return _descriptor(FieldKind.BOOLEAN, (), options)

    def null(self, **options: Any) -> FieldDescriptor:
        return _descriptor(FieldKind.NULL, (), options)

    def const(self, value: Any, **options: Any) -> FieldDescriptor:
        return _descriptor(FieldKind.CONST, (value,), options)

    def enum(self, type_name: str, values: Iterable[Any], **options: Any) -> FieldDescriptor:
        return _descriptor(FieldKind.ENUM, (type_name, tuple(values)), options)

    def array(
        self, item_type: str, item_options: Any = None, **options: Any
    ) -> FieldDescriptor:
        """Declare an array field.

        ``item_options`` may be raw item keywords, a schema, or a mapping of
        field descriptors describing object items.
        """
        return _descriptor(FieldKind.ARRAY, (item_type, item_options), options)

    def object(self, definition: Any, **options: Any) -> FieldDescriptor:
        """Declare a nested object from a schema, raw keywords or field descriptors."""
        return _descriptor(FieldKind.OBJECT, (definition,), options)


def is_descriptor_mapping(value: object) -> bool:
    """Return True for a non-empty mapping whose values are all descriptors."""
    return (
        isinstance(value, Mapping)
        and bool(value)
        and all(isinstance(item, FieldDescriptor) for item in value.values())
    )


def _descriptor(
    kind: FieldKind, arguments: tuple[Any, ...], options: Mapping[str, Any]
) -> FieldDescriptor:
    extra = dict(options)
    if "optional" in extra:
        raise SchemaDefinitionError(
            "Field descriptors cannot be marked optional; "
            "declare the field in the optional mapping of define_object_schema()."
        )
    nullable = bool(extra.pop("nullable", False))
    return FieldDescriptor(
        kind=kind,
        arguments=arguments,
        options=MappingProxyType(extra),
        is_nullable=nullable,
    )


field = FieldFactory()
