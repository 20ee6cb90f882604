"""Rendering of compiled schemas as JSON text."""

from __future__ import annotations

import json
from pathlib import Path

from schema_builder.configuration.runtime_settings import ExportSettings
from schema_builder.field_descriptors.fragment_models import JsonSchemaSource


def render_json_schema(schema: JsonSchemaSource, settings: ExportSettings) -> str:
    """Return the schema's JSON Schema document as text."""
    document = schema.to_json_schema()
    return json.dumps(document, indent=settings.indent, sort_keys=settings.sort_keys) + "\n"


def write_json_schema(
    schema: JsonSchemaSource, output_path: Path | str, settings: ExportSettings
) -> Path:
    """Write the rendered schema and return the resolved destination."""
    destination = Path(output_path)
    destination.write_text(render_json_schema(schema, settings), encoding="utf-8")
    return destination.resolve()
