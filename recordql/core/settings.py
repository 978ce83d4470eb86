"""
SchemaSettings implementation.
"""

from dataclasses import dataclass
from typing import Any, Optional

from django.conf import settings as django_settings
from django.utils.module_loading import import_string

from ..defaults import LIBRARY_DEFAULTS, merge_settings
from .interfaces import StorageBackendProtocol
from .exceptions import SchemaConfigurationError


def _get_global_settings() -> dict[str, Any]:
    """Get the RECORDQL block from Django settings."""
    configured = getattr(django_settings, "RECORDQL", None) or {}
    if not isinstance(configured, dict):
        raise SchemaConfigurationError("RECORDQL setting must be a dictionary")
    return configured


@dataclass
class SchemaSettings:
    """Settings for controlling schema construction and record storage."""

    auto_camelcase: bool = False
    storage_backend: str = "recordql.storage.orm.DjangoStorage"
    metadata_source: str = "database"
    max_page_size: Optional[int] = 100
    generate_root_queries: bool = True
    generate_root_mutations: bool = True

    @classmethod
    def from_settings(cls, **overrides: Any) -> "SchemaSettings":
        merged = merge_settings(LIBRARY_DEFAULTS, _get_global_settings())
        values = dict(merged.get("schema_settings", {}))
        values.update(overrides)
        valid_fields = set(cls.__dataclass_fields__.keys())
        return cls(**{k: v for k, v in values.items() if k in valid_fields})

    def validate(self) -> None:
        """Check that the configured backend and metadata source are usable."""
        try:
            import_string(self.storage_backend)
        except ImportError as e:
            raise SchemaConfigurationError(
                f"Storage backend '{self.storage_backend}' cannot be imported: {e}"
            ) from e
        if not self.metadata_source:
            raise SchemaConfigurationError("metadata_source must not be empty")
        if self.max_page_size is not None and self.max_page_size < 1:
            raise SchemaConfigurationError("max_page_size must be a positive integer")

    def get_storage(self) -> StorageBackendProtocol:
        """Instantiate the configured storage backend."""
        backend_class = import_string(self.storage_backend)
        return backend_class(max_page_size=self.max_page_size)
