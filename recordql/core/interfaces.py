"""
Common interfaces and protocols for recordql.
"""

from typing import Any, Mapping, Optional, Protocol, Sequence


class StorageBackendProtocol(Protocol):
    """Record storage consumed by generated resolvers.

    ``context`` is the GraphQL execution context of the request. Records are
    mappings (or objects) exposing an ``id``.
    """

    async def get_by_id(self, context: Any, type_name: str, record_id: Any) -> Any:
        ...

    async def get_all(self, context: Any, type_name: str) -> Sequence[Any]:
        ...

    async def get_all_by_index(
        self, context: Any, type_name: str, foreign_id: Any, index_name: str
    ) -> Sequence[Any]:
        ...

    async def create(
        self, context: Any, type_name: str, data: Mapping[str, Any]
    ) -> Any:
        ...

    async def update(
        self, context: Any, type_name: str, record_id: Any, data: Mapping[str, Any]
    ) -> Any:
        ...

    async def delete(self, context: Any, type_name: str, record_id: Any) -> Any:
        ...

    def apply_pagination(
        self, records: Sequence[Any], args: Optional[Mapping[str, Any]] = None
    ) -> Mapping[str, Any]:
        ...
