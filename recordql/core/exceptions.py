"""
Custom exceptions for schema construction and field resolution.

Configuration errors are raised while the schema is being built and abort
construction. Resolution errors are raised by resolvers at request time and
surface as field-level errors in the GraphQL response.
"""

from typing import Any, Optional


class RecordQLError(Exception):
    """Base exception for recordql errors."""


class SchemaConfigurationError(RecordQLError):
    """Raised when record metadata cannot be turned into a schema."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(message)


class InvalidFieldError(SchemaConfigurationError):
    """Raised when a field descriptor is malformed."""


class UnknownTypeError(SchemaConfigurationError):
    """Raised when a field references a type name that is not registered."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
        referenced_name: Optional[str] = None,
    ):
        self.referenced_name = referenced_name
        super().__init__(message, type_name, field_name)


class DuplicateTypeError(SchemaConfigurationError):
    """Raised when two types share a name."""


class RegistryFrozenError(SchemaConfigurationError):
    """Raised when a frozen type registry is modified."""


class ResolutionError(RecordQLError):
    """Base exception for errors raised while resolving a field."""


class RecordNotFoundError(ResolutionError):
    """Raised when a record lookup by id finds nothing."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        record_id: Optional[Any] = None,
    ):
        self.type_name = type_name
        self.record_id = record_id
        super().__init__(message)


class PaginationError(ResolutionError):
    """Raised when pagination arguments are invalid."""

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        self.argument = argument
        self.value = value
        super().__init__(message)
