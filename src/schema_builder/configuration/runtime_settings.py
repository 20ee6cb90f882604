"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ValidationSettings:
    """Options handed to the JSON Schema validator."""

    format_checking: bool = True


@dataclass(frozen=True)
class ExportSettings:
    """Rendering options for exported JSON Schema documents."""

    indent: int = 2
    sort_keys: bool = False


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    validation: ValidationSettings = field(default_factory=ValidationSettings)
    export: ExportSettings = field(default_factory=ExportSettings)
