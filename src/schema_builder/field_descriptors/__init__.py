"""Field descriptor exports."""

from .declarative_fields import FieldDescriptor, FieldFactory, FieldKind, field
from .fragment_builders import SchemaDefinitionError
from .fragment_models import JsonSchemaSource, SchemaFragment

__all__ = [
    "FieldDescriptor",
    "FieldFactory",
    "FieldKind",
    "JsonSchemaSource",
    "SchemaDefinitionError",
    "SchemaFragment",
    "field",
]
