"""
Default configuration for the recordql library.

Every setting the library consumes has its default here. Each section
mirrors a dataclass in ``recordql.core.settings``.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "recordql"


LIBRARY_DEFAULTS: dict[str, Any] = {
    "schema_settings": {
        "auto_camelcase": False,
        "storage_backend": "recordql.storage.orm.DjangoStorage",
        "metadata_source": "database",
        "max_page_size": 100,
        "generate_root_queries": True,
        "generate_root_mutations": True,
    },
}


def merge_settings(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge two settings dictionaries, descending into nested sections."""
    result = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_settings(result[key], value)
        else:
            result[key] = value
    return result
