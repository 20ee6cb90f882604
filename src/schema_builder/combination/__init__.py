"""Schema combination exports."""

from .combined_schema import CombinedSchema, SchemaCombinator, combine_schema

__all__ = ["CombinedSchema", "SchemaCombinator", "combine_schema"]
