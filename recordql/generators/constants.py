"""
Constants and mappings for type generation.
"""

import keyword
from typing import Iterable

import graphene

from ..core.scalars import DateTime

# Mapping of metadata primitive kinds to GraphQL scalar types
PRIMITIVE_TYPE_MAP = {
    "id": graphene.ID,
    "string": graphene.String,
    "integer": graphene.Int,
    "number": graphene.Float,
    "boolean": graphene.Boolean,
    "datetime": DateTime,
}

QUERY_ROOT_NAME = "_Query"
MUTATION_ROOT_NAME = "_Mutation"
CONNECTION_INTERFACE_NAME = "Connection"
MUTATION_INTERFACE_NAME = "Mutation"
PAGE_INFO_NAME = "PageInfo"

IDENTIFIER_FIELD = "id"
CLIENT_MUTATION_ID = "clientMutationId"

BUILTIN_SCALAR_NAMES = frozenset(
    {"String", "Int", "Float", "Boolean", "ID"}
    | {scalar._meta.name for scalar in PRIMITIVE_TYPE_MAP.values()}
)

# Names that built-in types, scalars or mutation payload fields already occupy
RESERVED_TYPE_NAMES = frozenset(
    {
        QUERY_ROOT_NAME,
        MUTATION_ROOT_NAME,
        CONNECTION_INTERFACE_NAME,
        MUTATION_INTERFACE_NAME,
        PAGE_INFO_NAME,
        CLIENT_MUTATION_ID,
    }
    | BUILTIN_SCALAR_NAMES
)

# Attribute holding the affected record on mutation payloads
PAYLOAD_RECORD_ATTRIBUTE = "record"


def connection_type_name(type_name: str) -> str:
    return f"_{type_name}Connection"


def edge_type_name(type_name: str) -> str:
    return f"_{type_name}Edge"


def input_object_name(type_name: str) -> str:
    return f"_{type_name}InputObject"


def mutation_type_name(type_name: str) -> str:
    return f"_{type_name}Mutation"


def attribute_name(name: str, taken: Iterable[str] = ()) -> str:
    """
    Python attribute name for a GraphQL field name.

    graphene stores fields as class attributes, so keywords such as ``from``
    or ``class`` get a trailing underscore, as do names already in ``taken``.
    """
    taken = set(taken)
    attname = name
    while keyword.iskeyword(attname) or attname in taken:
        attname += "_"
    return attname
