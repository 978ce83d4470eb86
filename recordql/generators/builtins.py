"""
Built-in interfaces shared by every generated type.
"""

from typing import NamedTuple

import graphene
from graphene.relay import PageInfo

from .constants import (
    CLIENT_MUTATION_ID,
    CONNECTION_INTERFACE_NAME,
    MUTATION_INTERFACE_NAME,
)


class Interfaces(NamedTuple):
    connection: type[graphene.Interface]
    mutation: type[graphene.Interface]
    page_info: type[graphene.ObjectType]


def create_interfaces() -> Interfaces:
    """
    Build the Connection and Mutation interfaces for one schema.

    Fresh classes are created per schema so several schemas can coexist in
    one process.
    """
    connection = type(
        "ConnectionInterface",
        (graphene.Interface,),
        {
            "Meta": type(
                "Meta",
                (),
                {
                    "name": CONNECTION_INTERFACE_NAME,
                    "description": "A paginated list of records.",
                },
            ),
            "count": graphene.Int(
                description="Number of records in the whole connection"
            ),
            "page_info": graphene.Field(
                graphene.NonNull(PageInfo),
                name="pageInfo",
                description="Pagination data for this connection",
            ),
        },
    )
    mutation = type(
        "MutationInterface",
        (graphene.Interface,),
        {
            "Meta": type(
                "Meta",
                (),
                {
                    "name": MUTATION_INTERFACE_NAME,
                    "description": "Payload returned by record mutations.",
                },
            ),
            "client_mutation_id": graphene.ID(
                name=CLIENT_MUTATION_ID,
                description="Client-supplied id echoed back for request correlation",
            ),
        },
    )
    return Interfaces(connection=connection, mutation=mutation, page_info=PageInfo)
