"""Schema accumulation exports."""

from schema_builder.field_descriptors.fragment_builders import SchemaDefinitionError

from .schema_accumulator import SchemaAccumulator, define_object_schema, define_schema
from .structural_operators import UnknownFieldError

__all__ = [
    "SchemaAccumulator",
    "SchemaDefinitionError",
    "UnknownFieldError",
    "define_object_schema",
    "define_schema",
]
