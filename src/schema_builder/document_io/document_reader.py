"""Reading of instance documents to validate."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


class DocumentError(Exception):
    """Raised when an instance document cannot be read."""


def load_instance_document(document_path: Path | str) -> Any:
    """Parse a JSON or YAML document into plain Python values.

    Files ending in ``.json`` are parsed as JSON, everything else as YAML.
    """
    path = Path(document_path)
    if not path.exists():
        raise DocumentError(f"Input document not found: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentError(f"Invalid JSON document {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentError(f"Invalid YAML document {path}: {exc}") from exc
