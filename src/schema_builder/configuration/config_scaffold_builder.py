"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-builder.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration for the schema-builder command line.
# Every setting is optional; the values below are the defaults.

validation:
  # Check "format" keywords (email, date-time, ...) while validating documents.
  format_checking: true

export:
  # Indentation used when writing JSON Schema documents.
  indent: 2
  # Sort object keys in exported JSON Schema documents.
  sort_keys: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
