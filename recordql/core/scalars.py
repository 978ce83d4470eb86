"""
DateTime scalar for record fields of kind ``datetime``.

Record storage may hand back either ``datetime`` objects (ORM, in-memory)
or the ISO 8601 strings they were encoded to in JSON columns, so both are
accepted on output. Naive values are taken to be in the current Django
time zone.
"""

from datetime import datetime
from typing import Any, Union

from django.utils import timezone
from django.utils.dateparse import parse_datetime
from graphene import Scalar
from graphql.error import GraphQLError
from graphql.language import ast


def _parse_iso(value: str) -> datetime:
    try:
        parsed = parse_datetime(value) or datetime.fromisoformat(
            value.replace("Z", "+00:00")
        )
    except (ValueError, TypeError) as e:
        raise GraphQLError(f"Invalid DateTime '{value}': {e}")
    return _make_aware(parsed)


def _make_aware(value: datetime) -> datetime:
    if timezone.is_naive(value):
        return timezone.make_aware(value)
    return value


class DateTime(Scalar):
    """Timezone-aware ISO 8601 date and time."""

    @staticmethod
    def serialize(value: Union[datetime, str]) -> str:
        if isinstance(value, str):
            return _parse_iso(value).isoformat()
        if isinstance(value, datetime):
            return _make_aware(value).isoformat()
        raise GraphQLError(
            f"DateTime cannot represent a value of type {type(value).__name__}"
        )

    @staticmethod
    def parse_literal(node: ast.Node, _variables: Any = None) -> datetime:
        if not isinstance(node, ast.StringValueNode):
            raise GraphQLError(f"DateTime literal must be a string, got {node.kind}")
        return _parse_iso(node.value)

    @staticmethod
    def parse_value(value: Any) -> datetime:
        if not isinstance(value, str):
            raise GraphQLError(
                f"DateTime input must be a string, got {type(value).__name__}"
            )
        return _parse_iso(value)
