"""
In-memory storage backend.

Keeps records in insertion order per type. Intended for development and
tests; nothing is persisted.
"""

import copy
import logging
from typing import Any, Iterable, Mapping, Optional

from ..core.exceptions import RecordNotFoundError
from .base import BaseStorage, get_record_value, new_record_id

logger = logging.getLogger(__name__)


class InMemoryStorage(BaseStorage):
    def __init__(
        self,
        records: Optional[Mapping[str, Iterable[Mapping[str, Any]]]] = None,
        max_page_size: Optional[int] = None,
    ):
        super().__init__(max_page_size=max_page_size)
        self._records: dict[str, dict[str, dict[str, Any]]] = {}
        for type_name, type_records in (records or {}).items():
            for record in type_records:
                self.add(type_name, record)

    def add(self, type_name: str, data: Mapping[str, Any]) -> dict[str, Any]:
        """Insert a record synchronously, assigning an id when missing."""
        record = dict(data)
        record_id = str(record.get("id") or new_record_id())
        record["id"] = record_id
        self._records.setdefault(type_name, {})[record_id] = record
        return copy.deepcopy(record)

    def _get(self, type_name: str, record_id: Any) -> dict[str, Any]:
        record = self._records.get(type_name, {}).get(str(record_id))
        if record is None:
            raise RecordNotFoundError(
                f"{type_name} with id '{record_id}' does not exist",
                type_name=type_name,
                record_id=record_id,
            )
        return record

    async def get_by_id(self, context: Any, type_name: str, record_id: Any) -> Any:
        logger.debug("Fetching %s %s", type_name, record_id)
        return copy.deepcopy(self._get(type_name, record_id))

    async def get_all(self, context: Any, type_name: str) -> list[Any]:
        return [copy.deepcopy(r) for r in self._records.get(type_name, {}).values()]

    async def get_all_by_index(
        self, context: Any, type_name: str, foreign_id: Any, index_name: str
    ) -> list[Any]:
        logger.debug("Fetching %s where %s=%s", type_name, index_name, foreign_id)
        return [
            copy.deepcopy(record)
            for record in self._records.get(type_name, {}).values()
            if foreign_id is not None
            and str(get_record_value(record, index_name)) == str(foreign_id)
        ]

    async def create(
        self, context: Any, type_name: str, data: Mapping[str, Any]
    ) -> Any:
        return self.add(type_name, {k: v for k, v in data.items() if k != "id"})

    async def update(
        self, context: Any, type_name: str, record_id: Any, data: Mapping[str, Any]
    ) -> Any:
        record = self._get(type_name, record_id)
        record.update({k: v for k, v in data.items() if k != "id"})
        return copy.deepcopy(record)

    async def delete(self, context: Any, type_name: str, record_id: Any) -> Any:
        record = self._get(type_name, record_id)
        del self._records[type_name][record["id"]]
        return copy.deepcopy(record)
