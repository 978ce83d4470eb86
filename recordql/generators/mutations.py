"""
Mutation payload type generation.
"""

import graphene

from .builtins import Interfaces
from .constants import PAYLOAD_RECORD_ATTRIBUTE, mutation_type_name


def create_mutation(type_set, interfaces: Interfaces) -> type[graphene.ObjectType]:
    """
    Generate the ``_<Type>Mutation`` payload.

    The payload carries ``clientMutationId`` (from the Mutation interface)
    and the affected record under a field named after the type.
    Resolvers return the record under the payload's ``record`` key.
    """
    object_type = type_set.type
    type_name = object_type._meta.name
    return type(
        mutation_type_name(type_name),
        (graphene.ObjectType,),
        {
            "Meta": type(
                "Meta",
                (),
                {
                    "name": mutation_type_name(type_name),
                    "interfaces": (interfaces.mutation,),
                    "description": f"Result of a {type_name} mutation.",
                },
            ),
            PAYLOAD_RECORD_ATTRIBUTE: graphene.Field(object_type, name=type_name),
        },
    )
