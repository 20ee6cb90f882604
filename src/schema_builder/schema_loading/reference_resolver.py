"""Resolution of ``package.module:attribute`` schema references."""

from __future__ import annotations

import importlib
import inspect
import logging

from schema_builder.field_descriptors.fragment_models import JsonSchemaSource

_LOGGER = logging.getLogger(__name__)


class SchemaReferenceError(Exception):
    """Raised when a schema reference cannot be resolved."""


def resolve_schema_reference(reference: str) -> JsonSchemaSource:
    """Import the object named by ``reference`` and return it as a schema.

    Classes and functions are called without arguments so that schema
    factories can be referenced directly.
    """
    module_path, separator, attribute_path = reference.partition(":")
    module_path = module_path.strip()
    attribute_path = attribute_path.strip()
    if not separator or not module_path or not attribute_path:
        raise SchemaReferenceError(
            f"Schema reference must look like 'package.module:attribute', got '{reference}'."
        )

    try:
        target: object = importlib.import_module(module_path)
    except ImportError as exc:
        raise SchemaReferenceError(f"Cannot import schema module {module_path}: {exc}") from exc

    for part in attribute_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise SchemaReferenceError(
                f"Module {module_path} has no attribute '{attribute_path}'."
            ) from exc

    if inspect.isroutine(target) or inspect.isclass(target):
        try:
            target = target()
        except Exception as exc:
            raise SchemaReferenceError(f"Schema factory '{reference}' failed: {exc}") from exc

    if not isinstance(target, JsonSchemaSource):
        raise SchemaReferenceError(
            f"'{reference}' does not provide to_json_schema(): {type(target).__name__}"
        )
    _LOGGER.debug("Resolved schema reference %s to %s", reference, type(target).__name__)
    return target
