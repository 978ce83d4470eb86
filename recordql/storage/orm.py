"""
Django ORM storage backend.

Records of every custom type live in the generic ``StoredRecord`` table;
field values are kept in its JSON ``data`` column. All access goes through
Django's async ORM API so resolvers never block the event loop.
"""

import logging
from typing import Any, Mapping, Optional

from ..core.exceptions import RecordNotFoundError
from .base import BaseStorage, new_record_id

logger = logging.getLogger(__name__)


def _writable(data: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key != "id"}


class DjangoStorage(BaseStorage):
    def __init__(self, max_page_size: Optional[int] = None, using: Optional[str] = None):
        super().__init__(max_page_size=max_page_size)
        self.using = using

    def _queryset(self, type_name: str):
        from ..models import StoredRecord

        queryset = StoredRecord.objects.filter(type_name=type_name)
        if self.using:
            queryset = queryset.using(self.using)
        return queryset

    async def _get_instance(self, type_name: str, record_id: Any):
        from ..models import StoredRecord

        try:
            return await self._queryset(type_name).aget(record_id=str(record_id))
        except StoredRecord.DoesNotExist:
            raise RecordNotFoundError(
                f"{type_name} with id '{record_id}' does not exist",
                type_name=type_name,
                record_id=record_id,
            )

    async def get_by_id(self, context: Any, type_name: str, record_id: Any) -> Any:
        logger.debug("Fetching %s %s", type_name, record_id)
        instance = await self._get_instance(type_name, record_id)
        return instance.as_record()

    async def get_all(self, context: Any, type_name: str) -> list[Any]:
        return [instance.as_record() async for instance in self._queryset(type_name)]

    async def get_all_by_index(
        self, context: Any, type_name: str, foreign_id: Any, index_name: str
    ) -> list[Any]:
        if foreign_id is None:
            return []
        logger.debug("Fetching %s where %s=%s", type_name, index_name, foreign_id)
        queryset = self._queryset(type_name).filter(
            **{f"data__{index_name}": foreign_id}
        )
        return [instance.as_record() async for instance in queryset]

    async def create(
        self, context: Any, type_name: str, data: Mapping[str, Any]
    ) -> Any:
        from ..models import StoredRecord

        instance = StoredRecord(
            type_name=type_name, record_id=new_record_id(), data=_writable(data)
        )
        await instance.asave(using=self.using)
        logger.debug("Created %s %s", type_name, instance.record_id)
        return instance.as_record()

    async def update(
        self, context: Any, type_name: str, record_id: Any, data: Mapping[str, Any]
    ) -> Any:
        instance = await self._get_instance(type_name, record_id)
        instance.data = {**instance.data, **_writable(data)}
        await instance.asave(using=self.using, update_fields=["data", "updated_at"])
        return instance.as_record()

    async def delete(self, context: Any, type_name: str, record_id: Any) -> Any:
        instance = await self._get_instance(type_name, record_id)
        record = instance.as_record()
        await instance.adelete(using=self.using)
        logger.debug("Deleted %s %s", type_name, record_id)
        return record
