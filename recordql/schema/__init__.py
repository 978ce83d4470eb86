"""
Schema construction: type registry and the two-pass builder.
"""

from .builder import (
    SchemaBuilder,
    SchemaConfig,
    build_schema,
    build_type_registry,
    create_schema,
    validate_metadata,
)
from .registry import TypeRegistry, TypeSet

__all__ = [
    "SchemaBuilder",
    "SchemaConfig",
    "TypeRegistry",
    "TypeSet",
    "build_schema",
    "build_type_registry",
    "create_schema",
    "validate_metadata",
]
