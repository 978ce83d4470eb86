"""
Field compilation.

Turns one field descriptor into a graphene field. Types of other records
are referenced through ``get_type_set`` lazily, so a type may point at a
type that is registered after it (or at itself).
"""

import logging
from typing import Any, Callable, Optional

import graphene

from ..core.interfaces import StorageBackendProtocol
from ..core.metadata import ConnectionKind, FieldMetadata, PrimitiveKind
from ..storage.base import get_record_value
from .connections import create_connection_arguments
from .constants import IDENTIFIER_FIELD, PRIMITIVE_TYPE_MAP

logger = logging.getLogger(__name__)

DEPRECATION_REASON = "Deprecated"


def _resolve_connection(
    storage: StorageBackendProtocol, target: str, reverse_name: str
) -> Callable:
    async def resolver(parent: Any, info: graphene.ResolveInfo, **kwargs):
        records = await storage.get_all_by_index(
            info.context,
            target,
            get_record_value(parent, IDENTIFIER_FIELD),
            reverse_name,
        )
        return storage.apply_pagination(records, kwargs)

    return resolver


def _resolve_value(field_name: str) -> Callable:
    def resolver(parent: Any, info: graphene.ResolveInfo, **kwargs):
        return get_record_value(parent, field_name)

    return resolver


def _resolve_reference(
    storage: StorageBackendProtocol, type_name: str, field_name: str
) -> Callable:
    async def resolver(parent: Any, info: graphene.ResolveInfo, **kwargs):
        record_id = get_record_value(parent, field_name)
        if record_id is None:
            return None
        return await storage.get_by_id(info.context, type_name, record_id)

    return resolver


def compile_field(
    field_metadata: FieldMetadata,
    get_type_set: Callable[[str], Any],
    storage: StorageBackendProtocol,
    attname: Optional[str] = None,
) -> graphene.Field:
    """
    Build the graphene field for a field descriptor.

    Connections expose the target's connection type with the pagination
    arguments; references to another record type resolve by id; primitives
    use the default property resolver unless the field is stored under an
    ``attname`` other than its own name. Required fields are non-null.
    """
    kind = field_metadata.kind
    args = None
    resolver = None

    if isinstance(kind, ConnectionKind):
        target = kind.target

        def field_type():
            return get_type_set(target).connection

        args = create_connection_arguments()
        resolver = _resolve_connection(storage, target, kind.reverse_name)
    elif isinstance(kind, PrimitiveKind):
        field_type = PRIMITIVE_TYPE_MAP[kind.kind]
        if attname is not None and attname != field_metadata.name:
            resolver = _resolve_value(field_metadata.name)
    else:
        type_name = kind.type_name

        def field_type():
            return get_type_set(type_name).type

        resolver = _resolve_reference(storage, type_name, field_metadata.name)

    if field_metadata.is_required:
        field_type = graphene.NonNull(field_type)

    return graphene.Field(
        field_type,
        args=args,
        resolver=resolver,
        name=field_metadata.name,
        description=field_metadata.description,
        deprecation_reason=DEPRECATION_REASON if field_metadata.is_deprecated else None,
    )
