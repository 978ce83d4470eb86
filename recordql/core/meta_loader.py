"""
Load record type metadata from the persisted store or from a file.

Files hold a list of type descriptors (JSON, or YAML when PyYAML is
installed); alternatively the list may sit under a top-level ``types`` key.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from .exceptions import SchemaConfigurationError
from .metadata import TypeMetadata, parse_metadata

logger = logging.getLogger(__name__)

try:
    import yaml
except Exception:  # pragma: no cover - optional dependency
    yaml = None

DATABASE_SOURCE = "database"


def _load_payload(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        if path.suffix.lower() in {".yaml", ".yml"}:
            if yaml is None:
                raise SchemaConfigurationError(
                    f"PyYAML is required to read metadata file {path}"
                )
            return yaml.safe_load(handle)
        return json.load(handle)


def load_metadata_file(path: Union[str, Path]) -> list[TypeMetadata]:
    """Parse the type descriptors stored in ``path``."""
    path = Path(path)
    if not path.exists():
        raise SchemaConfigurationError(f"Metadata file {path} does not exist")
    try:
        payload = _load_payload(path)
    except (OSError, ValueError) as e:
        logger.error("Could not read metadata file %s: %s", path, e)
        raise SchemaConfigurationError(
            f"Could not read metadata file {path}: {e}"
        ) from e

    if isinstance(payload, dict):
        payload = payload.get("types")
    if not isinstance(payload, list):
        raise SchemaConfigurationError(
            f"Metadata file {path} must contain a list of type descriptors"
        )
    metadata = parse_metadata(payload)
    logger.info("Loaded %d record types from %s", len(metadata), path)
    return metadata


def load_metadata_from_database(using: str = "default") -> list[TypeMetadata]:
    """Read type descriptors from the RecordType/RecordField models."""
    from ..models import RecordType

    payloads = []
    queryset = RecordType.objects.using(using).prefetch_related("fields")
    for record_type in queryset:
        payloads.append(
            {
                "name": record_type.name,
                "description": record_type.description or None,
                "fields": [f.to_metadata_payload() for f in record_type.fields.all()],
            }
        )
    metadata = parse_metadata(payloads)
    logger.info("Loaded %d record types from the database", len(metadata))
    return metadata


def load_metadata(source: str) -> list[TypeMetadata]:
    """Load metadata from ``"database"`` or from a file path."""
    if source == DATABASE_SOURCE:
        return load_metadata_from_database()
    return load_metadata_file(source)
