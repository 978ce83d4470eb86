"""
Connection type generation.

A connection wraps an object type in the cursor pagination shape: an edge
list, the plain node list, the total count and page info.
"""

import graphene

from .builtins import Interfaces
from .constants import connection_type_name, edge_type_name


def create_connection_arguments() -> dict[str, graphene.Argument]:
    """Return the standard forward/backward pagination arguments."""
    return {
        "first": graphene.Argument(
            graphene.Int, description="Number of records after the cursor"
        ),
        "after": graphene.Argument(
            graphene.String, description="Cursor to paginate forward from"
        ),
        "last": graphene.Argument(
            graphene.Int, description="Number of records before the cursor"
        ),
        "before": graphene.Argument(
            graphene.String, description="Cursor to paginate backward from"
        ),
    }


def create_connection(type_set, interfaces: Interfaces) -> type[graphene.ObjectType]:
    object_type = type_set.type
    type_name = object_type._meta.name

    edge = type(
        edge_type_name(type_name),
        (graphene.ObjectType,),
        {
            "Meta": type(
                "Meta",
                (),
                {
                    "name": edge_type_name(type_name),
                    "description": f"An edge in a connection of {type_name}.",
                },
            ),
            "cursor": graphene.String(required=True),
            "node": graphene.Field(object_type),
        },
    )

    return type(
        connection_type_name(type_name),
        (graphene.ObjectType,),
        {
            "Meta": type(
                "Meta",
                (),
                {
                    "name": connection_type_name(type_name),
                    "interfaces": (interfaces.connection,),
                    "description": f"A paginated list of {type_name} records.",
                },
            ),
            "edges": graphene.List(graphene.NonNull(edge)),
            "nodes": graphene.List(object_type),
        },
    )
