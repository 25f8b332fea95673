from __future__ import annotations

import logging
from typing import Any

from ..common.datetime_utils import iso_timestamp
from ..core.exceptions import NotFoundError, StoreError
from ..realtime.hub import REFRESH, Publisher
from .repository import EntryRepository

logger = logging.getLogger(__name__)


class EntryService:
    """Legacy entries CRUD.

    Mutations publish a bare ``refresh`` instead of a typed event; clients
    reload the whole list.
    """

    def __init__(self, entries: EntryRepository, publisher: Publisher):
        self._entries = entries
        self._publisher = publisher

    async def list_entries(self) -> list[dict]:
        return [e.to_dict() for e in await self._entries.list_desc()]

    async def create_entry(self, name: Any, date: Any = None, note: Any = None) -> dict:
        entry_id = await self._entries.create(name=name, date=date, note=note, updated_at=iso_timestamp())
        entry = await self._entries.get_by_id(entry_id)
        if not entry:
            raise StoreError(f"Inserted entry {entry_id} could not be read back")
        logger.info("Entry %s created", entry_id)
        self._publisher.publish(REFRESH)
        return entry.to_dict()

    async def update_entry(self, entry_id: int, name: Any, date: Any = None, note: Any = None) -> dict:
        if not await self._entries.get_by_id(entry_id):
            raise NotFoundError("Not found")

        await self._entries.update(entry_id, name=name, date=date, note=note, updated_at=iso_timestamp())
        entry = await self._entries.get_by_id(entry_id)
        if not entry:
            raise NotFoundError("Not found")
        logger.info("Entry %s updated", entry_id)
        self._publisher.publish(REFRESH)
        return entry.to_dict()

    async def delete_entry(self, entry_id: int) -> dict:
        if not await self._entries.get_by_id(entry_id):
            raise NotFoundError("Not found")

        await self._entries.delete_by_id(entry_id)
        logger.info("Entry %s deleted", entry_id)
        self._publisher.publish(REFRESH)
        return {"deletedId": entry_id}
