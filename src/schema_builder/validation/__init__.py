"""Validation exports."""

from jsonschema import ValidationError

from .validation_adapter import DEFAULT_FORMAT_CHECKER, assert_valid, compile_validator, validate

__all__ = [
    "DEFAULT_FORMAT_CHECKER",
    "ValidationError",
    "assert_valid",
    "compile_validator",
    "validate",
]
