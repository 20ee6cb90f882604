"""Validation of dirty input against compiled schemas."""

from __future__ import annotations

import logging
from typing import Any, TypeGuard

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.exceptions import best_match
from jsonschema.protocols import Validator

from schema_builder.field_descriptors.fragment_models import JsonSchemaSource

_LOGGER = logging.getLogger(__name__)

DEFAULT_FORMAT_CHECKER = Draft7Validator.FORMAT_CHECKER


def validate(
    instance: object,
    schema: JsonSchemaSource,
    *,
    format_checker: FormatChecker | None = DEFAULT_FORMAT_CHECKER,
    validator_class: type[Validator] = Draft7Validator,
) -> TypeGuard[dict[str, Any]]:
    """Return True when ``instance`` satisfies ``schema``.

    Validation errors are suppressed; a schema that is itself invalid still
    raises ``jsonschema.SchemaError``.
    """
    validator = compile_validator(
        schema, format_checker=format_checker, validator_class=validator_class
    )
    is_valid = validator.is_valid(instance)
    _LOGGER.debug("Instance %s the compiled schema.", "matches" if is_valid else "violates")
    return is_valid


def assert_valid(
    instance: object,
    schema: JsonSchemaSource,
    *,
    format_checker: FormatChecker | None = DEFAULT_FORMAT_CHECKER,
    validator_class: type[Validator] = Draft7Validator,
) -> None:
    """Raise the validator's ``ValidationError`` when ``instance`` violates ``schema``.

    When several constraints fail, jsonschema's ``best_match`` picks the error to
    raise; inside ``oneOf`` it descends into the most relevant branch. The error
    is the validator's own exception, not a wrapper.
    """
    validator = compile_validator(
        schema, format_checker=format_checker, validator_class=validator_class
    )
    error = best_match(validator.iter_errors(instance))
    if error is not None:
        _LOGGER.debug("Instance violates the compiled schema: %s", error.message)
        raise error


def compile_validator(
    schema: JsonSchemaSource,
    *,
    format_checker: FormatChecker | None = DEFAULT_FORMAT_CHECKER,
    validator_class: type[Validator] = Draft7Validator,
) -> Validator:
    """Compile ``schema`` and build a validator for it."""
    document = schema.to_json_schema()
    validator_class.check_schema(document)
    _LOGGER.debug("Compiled schema with %d top-level keywords.", len(document))
    return validator_class(document, format_checker=format_checker)
