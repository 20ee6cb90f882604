"""Schema loading exports."""

from .reference_resolver import SchemaReferenceError, resolve_schema_reference

__all__ = ["SchemaReferenceError", "resolve_schema_reference"]
