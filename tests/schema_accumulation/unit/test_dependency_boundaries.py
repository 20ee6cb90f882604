"""Boundary tests for the schema-building core."""

from __future__ import annotations

from pathlib import Path


def _package_root() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "schema_builder"


def test_builder_core_does_not_import_io_or_validator_libraries() -> None:
    core_dirs = (
        _package_root() / "field_descriptors",
        _package_root() / "schema_accumulation",
        _package_root() / "combination",
    )
    forbidden_import_fragments = (
        "import jsonschema",
        "from jsonschema",
        "import yaml",
        "import click",
        "schema_builder.validation",
        "schema_builder.cli",
    )

    for core_dir in core_dirs:
        for module_path in core_dir.glob("*.py"):
            text = module_path.read_text(encoding="utf-8")
            for fragment in forbidden_import_fragments:
                assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
