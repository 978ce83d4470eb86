"""
Object type generation.
"""

import logging
from typing import Any, Callable, Iterable

import graphene

from ..core.metadata import TypeMetadata
from .constants import attribute_name
from .fields import compile_field

logger = logging.getLogger(__name__)


def create_type(
    type_metadata: TypeMetadata,
    get_type_set: Callable[[str], Any],
    storage: Any,
    interfaces: Iterable[type[graphene.Interface]] = (),
) -> type[graphene.ObjectType]:
    """
    Generate the object type for a record type.

    Field types pointing at other records are resolved through
    ``get_type_set`` only when graphene first reads them, which lets types
    reference each other regardless of the order they are built in.
    """
    fields = {}
    for field_metadata in type_metadata.fields:
        attname = attribute_name(field_metadata.name, fields)
        fields[attname] = compile_field(
            field_metadata, get_type_set, storage, attname=attname
        )
    meta_class = type(
        "Meta",
        (),
        {
            "name": type_metadata.name,
            "interfaces": tuple(interfaces),
            "description": type_metadata.description,
        },
    )
    logger.debug(
        f"Generated object type {type_metadata.name} with {len(fields)} fields"
    )
    return type(
        type_metadata.name,
        (graphene.ObjectType,),
        {"Meta": meta_class, **fields},
    )
