"""
Record type metadata.

Metadata describes custom record types and their fields. It is parsed once
at startup from plain mappings (JSON, YAML or database rows) into frozen
dataclasses. The kind of every field is decided at parse time: a primitive
scalar, a paginated connection to another type, or a reference to a single
record of another type.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

from ..generators.constants import PRIMITIVE_TYPE_MAP
from .exceptions import InvalidFieldError

logger = logging.getLogger(__name__)

CONNECTION_KIND = "connection"

_NAME_RE = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")

# Names graphene reserves on generated classes
_RESERVED_NAMES = frozenset({"Meta"})


@dataclass(frozen=True)
class PrimitiveKind:
    """A scalar field, mapped through the primitive type map."""

    kind: str


@dataclass(frozen=True)
class ConnectionKind:
    """A one-to-many relationship exposed as a paginated connection.

    ``reverse_name`` is the field on ``target`` that holds the parent id.
    """

    target: str
    reverse_name: str


@dataclass(frozen=True)
class ReferenceKind:
    """A field holding the id of a single record of another type."""

    type_name: str


FieldKind = Union[PrimitiveKind, ConnectionKind, ReferenceKind]


@dataclass(frozen=True)
class FieldMetadata:
    name: str
    kind: FieldKind
    is_required: bool = False
    is_deprecated: bool = False
    description: Optional[str] = None

    @property
    def referenced_type(self) -> Optional[str]:
        """Name of the record type this field points at, if any."""
        if isinstance(self.kind, ConnectionKind):
            return self.kind.target
        if isinstance(self.kind, ReferenceKind):
            return self.kind.type_name
        return None


@dataclass(frozen=True)
class TypeMetadata:
    name: str
    fields: tuple[FieldMetadata, ...] = field(default_factory=tuple)
    description: Optional[str] = None

    def get_field(self, name: str) -> Optional[FieldMetadata]:
        for field_metadata in self.fields:
            if field_metadata.name == name:
                return field_metadata
        return None


def is_valid_name(name: Any) -> bool:
    """Return True if ``name`` can be used as a GraphQL type or field name."""
    return (
        isinstance(name, str)
        and bool(_NAME_RE.match(name))
        and not name.startswith("__")
        and name not in _RESERVED_NAMES
    )


def _pick(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def parse_field_kind(
    type_string: str,
    target: Optional[str] = None,
    reverse_name: Optional[str] = None,
    *,
    type_name: Optional[str] = None,
    field_name: Optional[str] = None,
) -> FieldKind:
    """Decide the kind of a field from its type string."""
    if type_string == CONNECTION_KIND:
        if not target:
            raise InvalidFieldError(
                f"Connection field '{type_name}.{field_name}' must define a target",
                type_name,
                field_name,
            )
        if not reverse_name:
            raise InvalidFieldError(
                f"Connection field '{type_name}.{field_name}' must define a reverseName",
                type_name,
                field_name,
            )
        return ConnectionKind(target=target, reverse_name=reverse_name)
    if type_string in PRIMITIVE_TYPE_MAP:
        return PrimitiveKind(kind=type_string)
    if not is_valid_name(type_string):
        raise InvalidFieldError(
            f"Field '{type_name}.{field_name}' has invalid type '{type_string}'",
            type_name,
            field_name,
        )
    return ReferenceKind(type_name=type_string)


def parse_field_metadata(
    payload: Mapping[str, Any], type_name: Optional[str] = None
) -> FieldMetadata:
    if not isinstance(payload, Mapping):
        raise InvalidFieldError(
            f"Field descriptor on '{type_name}' must be a mapping", type_name
        )
    name = payload.get("name")
    if not is_valid_name(name):
        raise InvalidFieldError(
            f"Invalid field name {name!r} on type '{type_name}'", type_name, name
        )
    type_string = payload.get("type")
    if not type_string:
        raise InvalidFieldError(
            f"Field '{type_name}.{name}' is missing a type", type_name, name
        )
    kind = parse_field_kind(
        type_string,
        _pick(payload, "target"),
        _pick(payload, "reverseName", "reverse_name"),
        type_name=type_name,
        field_name=name,
    )
    return FieldMetadata(
        name=name,
        kind=kind,
        is_required=bool(_pick(payload, "isRequired", "is_required", default=False)),
        is_deprecated=bool(
            _pick(payload, "isDeprecated", "is_deprecated", default=False)
        ),
        description=payload.get("description") or None,
    )


def parse_type_metadata(payload: Mapping[str, Any]) -> TypeMetadata:
    if not isinstance(payload, Mapping):
        raise InvalidFieldError("Type descriptor must be a mapping")
    name = payload.get("name")
    if not is_valid_name(name):
        raise InvalidFieldError(f"Invalid type name {name!r}", name)

    fields = []
    seen: set[str] = set()
    for field_payload in payload.get("fields") or []:
        field_metadata = parse_field_metadata(field_payload, name)
        if field_metadata.name in seen:
            raise InvalidFieldError(
                f"Duplicate field '{field_metadata.name}' on type '{name}'",
                name,
                field_metadata.name,
            )
        seen.add(field_metadata.name)
        fields.append(field_metadata)

    return TypeMetadata(
        name=name,
        fields=tuple(fields),
        description=payload.get("description") or None,
    )


def parse_metadata(payloads: Iterable[Mapping[str, Any]]) -> list[TypeMetadata]:
    """Parse a sequence of type descriptors, preserving their order."""
    metadata = [parse_type_metadata(payload) for payload in payloads]
    logger.debug("Parsed metadata for %d record types", len(metadata))
    return metadata
