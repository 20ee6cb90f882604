"""Document input/output exports."""

from .document_reader import DocumentError, load_instance_document
from .schema_rendering import render_json_schema, write_json_schema

__all__ = [
    "DocumentError",
    "load_instance_document",
    "render_json_schema",
    "write_json_schema",
]
