"""
Shared storage helpers: record access and cursor pagination.
"""

import logging
import uuid
from typing import Any, Mapping, Optional, Sequence

from graphene.types.resolver import dict_or_attr_resolver
from graphql_relay import connection_from_array

from ..core.exceptions import PaginationError

logger = logging.getLogger(__name__)

PAGINATION_ARGUMENTS = ("first", "last", "after", "before")


def get_record_value(record: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a record that is either a mapping or an object."""
    if record is None:
        return default
    return dict_or_attr_resolver(name, default, record, None)


def new_record_id() -> str:
    return uuid.uuid4().hex


class BaseStorage:
    """Base class for storage backends.

    Subclasses implement the coroutine lookups and writes; pagination over an
    already-fetched sequence of records is shared.
    """

    def __init__(self, max_page_size: Optional[int] = None):
        self.max_page_size = max_page_size

    def _validate_page_size(self, argument: str, value: Any) -> None:
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise PaginationError(
                f"Argument '{argument}' must be a non-negative integer",
                argument=argument,
                value=value,
            )
        if self.max_page_size is not None and value > self.max_page_size:
            raise PaginationError(
                f"Argument '{argument}' must not exceed {self.max_page_size}",
                argument=argument,
                value=value,
            )

    def apply_pagination(
        self, records: Sequence[Any], args: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Slice ``records`` with the forward/backward cursor arguments.

        Returns a connection-shaped mapping with ``edges``, ``nodes``,
        ``count`` (size of the whole set) and ``page_info``.
        """
        args = {
            key: value
            for key, value in (args or {}).items()
            if key in PAGINATION_ARGUMENTS and value is not None
        }
        for argument in ("first", "last"):
            if argument in args:
                self._validate_page_size(argument, args[argument])

        records = list(records)
        try:
            connection = connection_from_array(records, args)
        except ValueError as e:
            raise PaginationError(str(e)) from e

        edges = [{"node": edge.node, "cursor": edge.cursor} for edge in connection.edges]
        page_info = connection.pageInfo
        return {
            "edges": edges,
            "nodes": [edge["node"] for edge in edges],
            "count": len(records),
            "page_info": {
                "has_next_page": page_info.hasNextPage,
                "has_previous_page": page_info.hasPreviousPage,
                "start_cursor": page_info.startCursor,
                "end_cursor": page_info.endCursor,
            },
        }
