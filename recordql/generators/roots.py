"""
Root field generation.

A root field creator is a callable ``(type_set, storage)`` returning a
``(field_name, graphene.Field)`` pair, or None to contribute nothing for
that type. Creators run once per record type built from metadata.
"""

import logging
from typing import Any, Callable, Iterable, Optional

import graphene

from ..core.exceptions import SchemaConfigurationError
from .connections import create_connection_arguments
from .constants import CLIENT_MUTATION_ID, PAYLOAD_RECORD_ATTRIBUTE
from .inputs import input_to_record

logger = logging.getLogger(__name__)

RootFieldCreator = Callable[[Any, Any], Optional[tuple[str, graphene.Field]]]


def _client_mutation_id_argument() -> graphene.Argument:
    return graphene.Argument(graphene.ID, name=CLIENT_MUTATION_ID)


def _payload(record: Any, client_mutation_id: Any) -> dict[str, Any]:
    return {
        "client_mutation_id": client_mutation_id,
        PAYLOAD_RECORD_ATTRIBUTE: record,
    }


def create_get_field(type_set, storage) -> tuple[str, graphene.Field]:
    type_name = type_set.name

    async def resolver(root, info, **kwargs):
        return await storage.get_by_id(info.context, type_name, kwargs["id"])

    field_name = f"get{type_name}"
    return field_name, graphene.Field(
        type_set.type,
        args={"id": graphene.Argument(graphene.NonNull(graphene.ID))},
        resolver=resolver,
        name=field_name,
        description=f"Fetch a {type_name} by id.",
    )


def create_all_field(type_set, storage) -> tuple[str, graphene.Field]:
    type_name = type_set.name

    async def resolver(root, info, **kwargs):
        records = await storage.get_all(info.context, type_name)
        return storage.apply_pagination(records, kwargs)

    field_name = f"all{type_name}s"
    return field_name, graphene.Field(
        type_set.connection,
        args=create_connection_arguments(),
        resolver=resolver,
        name=field_name,
        description=f"Paginated list of every {type_name}.",
    )


def create_create_field(type_set, storage) -> Optional[tuple[str, graphene.Field]]:
    if type_set.input_object is None:
        return None
    type_name = type_set.name

    async def resolver(root, info, **kwargs):
        record = await storage.create(
            info.context,
            type_name,
            input_to_record(type_set.input_object, kwargs["input"]),
        )
        return _payload(record, kwargs.get("client_mutation_id"))

    field_name = f"create{type_name}"
    return field_name, graphene.Field(
        type_set.mutation,
        args={
            "input": graphene.Argument(graphene.NonNull(type_set.input_object)),
            "client_mutation_id": _client_mutation_id_argument(),
        },
        resolver=resolver,
        name=field_name,
        description=f"Create a {type_name}.",
    )


def create_update_field(type_set, storage) -> Optional[tuple[str, graphene.Field]]:
    if type_set.input_object is None:
        return None
    type_name = type_set.name

    async def resolver(root, info, **kwargs):
        record = await storage.update(
            info.context,
            type_name,
            kwargs["id"],
            input_to_record(type_set.input_object, kwargs["input"]),
        )
        return _payload(record, kwargs.get("client_mutation_id"))

    field_name = f"update{type_name}"
    return field_name, graphene.Field(
        type_set.mutation,
        args={
            "id": graphene.Argument(graphene.NonNull(graphene.ID)),
            "input": graphene.Argument(graphene.NonNull(type_set.input_object)),
            "client_mutation_id": _client_mutation_id_argument(),
        },
        resolver=resolver,
        name=field_name,
        description=(
            f"Update a {type_name}. Takes the full input; optional fields "
            "left out keep their stored values."
        ),
    )


def create_delete_field(type_set, storage) -> tuple[str, graphene.Field]:
    type_name = type_set.name

    async def resolver(root, info, **kwargs):
        record = await storage.delete(info.context, type_name, kwargs["id"])
        return _payload(record, kwargs.get("client_mutation_id"))

    field_name = f"delete{type_name}"
    return field_name, graphene.Field(
        type_set.mutation,
        args={
            "id": graphene.Argument(graphene.NonNull(graphene.ID)),
            "client_mutation_id": _client_mutation_id_argument(),
        },
        resolver=resolver,
        name=field_name,
        description=f"Delete a {type_name}.",
    )


DEFAULT_QUERY_FIELD_CREATORS: tuple[RootFieldCreator, ...] = (
    create_get_field,
    create_all_field,
)

DEFAULT_MUTATION_FIELD_CREATORS: tuple[RootFieldCreator, ...] = (
    create_create_field,
    create_update_field,
    create_delete_field,
)


def create_root_fields_for_types(
    creators: Iterable[RootFieldCreator], registry, storage
) -> dict[str, graphene.Field]:
    """Run every creator over every record type built from metadata."""
    creators = tuple(creators)
    fields: dict[str, graphene.Field] = {}
    for type_set in registry.values():
        if type_set.is_builtin:
            continue
        for creator in creators:
            created = creator(type_set, storage)
            if created is None:
                continue
            field_name, field = created
            if field_name in fields:
                raise SchemaConfigurationError(
                    f"Root field '{field_name}' is generated twice", type_set.name
                )
            fields[field_name] = field
    return fields


def create_root_type(name: str, fields: dict[str, Any]) -> type[graphene.ObjectType]:
    return type(
        name,
        (graphene.ObjectType,),
        {"Meta": type("Meta", (), {"name": name}), **fields},
    )
