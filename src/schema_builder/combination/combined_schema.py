"""Combinators wrapping several schemas into one."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from schema_builder.field_descriptors.fragment_builders import SchemaDefinitionError
from schema_builder.field_descriptors.fragment_models import JsonSchemaSource


@dataclass(frozen=True)
class CombinedSchema:
    """Schema accepting instances that match exactly one branch."""

    branches: tuple[JsonSchemaSource, ...]

    def to_json_schema(self) -> dict[str, Any]:
        return {"oneOf": [branch.to_json_schema() for branch in self.branches]}


class SchemaCombinator:  # pylint: disable=too-few-public-methods
    """Entry points for combining schemas, exposed as ``combine_schema``."""

    def one_of(self, branches: Iterable[JsonSchemaSource]) -> CombinedSchema:
        """Combine ``branches`` in order into a ``oneOf`` schema."""
        collected = tuple(branches)
        if not collected:
            raise SchemaDefinitionError("one_of requires at least one branch schema.")
        for index, branch in enumerate(collected):
            if not isinstance(branch, JsonSchemaSource):
                raise SchemaDefinitionError(
                    f"Branch {index} does not provide to_json_schema(): {type(branch).__name__}"
                )
        return CombinedSchema(branches=collected)


combine_schema = SchemaCombinator()
