"""
Input type generation helpers.

Input objects are derived from an already-built object type: identity and
connections are dropped, input-safe types are kept, and references to other
object types degrade to strings (the referenced record's id).
"""

import inspect
import logging
from typing import Any, Optional

import graphene

from .builtins import Interfaces
from .constants import IDENTIFIER_FIELD, input_object_name

logger = logging.getLogger(__name__)

_WRAPPERS = (graphene.NonNull, graphene.List)
_INPUT_SAFE_TYPES = (graphene.Scalar, graphene.Enum, graphene.InputObjectType)


def unwrap_type(field_type: Any) -> tuple[Any, list[type]]:
    """Strip list/non-null wrappers, returning the named type and the wrapper classes."""
    wrappers = []
    while isinstance(field_type, _WRAPPERS):
        wrappers.append(type(field_type))
        field_type = field_type.of_type
    return field_type, wrappers


def rewrap_type(named_type: Any, wrappers: list[type]) -> Any:
    for wrapper in reversed(wrappers):
        named_type = wrapper(named_type)
    return named_type


def is_input_safe(named_type: Any) -> bool:
    return inspect.isclass(named_type) and issubclass(named_type, _INPUT_SAFE_TYPES)


def implements_interface(named_type: Any, interface: Any) -> bool:
    if not (inspect.isclass(named_type) and issubclass(named_type, graphene.ObjectType)):
        return False
    return interface in (named_type._meta.interfaces or ())


def convert_field_to_input(field: graphene.Field) -> Any:
    """Return the input type for an object field."""
    named_type, wrappers = unwrap_type(field.type)
    if is_input_safe(named_type):
        return field.type
    return rewrap_type(graphene.String, wrappers)


def create_input_object(
    type_set, interfaces: Interfaces
) -> Optional[type[graphene.InputObjectType]]:
    """
    Generate the mutation input object for ``type_set.type``.

    Returns None when no field survives the filter, since GraphQL input
    objects need at least one field.
    """
    object_type = type_set.type
    type_name = object_type._meta.name

    input_fields = {}
    for name, field in object_type._meta.fields.items():
        if name == IDENTIFIER_FIELD:
            continue
        named_type, _ = unwrap_type(field.type)
        if implements_interface(named_type, interfaces.connection):
            continue
        input_fields[name] = graphene.InputField(
            convert_field_to_input(field),
            name=field.name,
            description=field.description,
        )

    if not input_fields:
        logger.debug(f"No input fields for {type_name}, skipping input object")
        return None

    return type(
        input_object_name(type_name),
        (graphene.InputObjectType,),
        {
            "Meta": type(
                "Meta",
                (),
                {
                    "name": input_object_name(type_name),
                    "description": f"Input for creating or updating {type_name}.",
                },
            ),
            **input_fields,
        },
    )


def input_to_record(input_object: Any, value: Any) -> dict[str, Any]:
    """Key submitted input values by field name instead of Python attribute name."""
    fields = input_object._meta.fields
    record = {}
    for attname, item in dict(value).items():
        field = fields.get(attname)
        record[field.name if field is not None and field.name else attname] = item
    return record
