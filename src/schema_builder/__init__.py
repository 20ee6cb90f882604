"""Fluent, immutable JSON Schema (Draft 7) definitions with validation helpers."""

import logging

from .combination import CombinedSchema, combine_schema
from .field_descriptors import FieldDescriptor, JsonSchemaSource, field
from .schema_accumulation import (
    SchemaAccumulator,
    SchemaDefinitionError,
    UnknownFieldError,
    define_object_schema,
    define_schema,
)
from .type_derivation import dirty_type, pure_type
from .validation import ValidationError, assert_valid, validate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CombinedSchema",
    "FieldDescriptor",
    "JsonSchemaSource",
    "SchemaAccumulator",
    "SchemaDefinitionError",
    "UnknownFieldError",
    "ValidationError",
    "assert_valid",
    "combine_schema",
    "define_object_schema",
    "define_schema",
    "dirty_type",
    "field",
    "pure_type",
    "validate",
]
