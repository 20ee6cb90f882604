"""Fragment-level schema entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

SchemaFragment = Mapping[str, Any]

NULL_TYPE = "null"


@runtime_checkable
class JsonSchemaSource(Protocol):  # pylint: disable=too-few-public-methods
    """Anything that compiles to a JSON Schema document."""

    def to_json_schema(self) -> dict[str, Any]: ...
