"""Type derivation exports."""

from .typed_dict_builder import dirty_type, pure_type

__all__ = ["dirty_type", "pure_type"]
