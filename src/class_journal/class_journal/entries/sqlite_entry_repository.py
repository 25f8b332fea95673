from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.sqlite_base import RecordStore
from .model import Entry
from .repository import EntryRepository


def _to_entry(row: dict) -> Entry:
    return Entry(
        entry_id=int(row["id"]),
        name=row["name"],
        date=row["date"],
        note=row["note"],
        updated_at=row["updatedAt"],
    )


class SQLiteEntryRepository(EntryRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    async def list_desc(self) -> Sequence[Entry]:
        rows = await self._store.query_many("SELECT id, name, date, note, updatedAt FROM entries ORDER BY id DESC")
        return [_to_entry(r) for r in rows]

    async def get_by_id(self, entry_id: int) -> Optional[Entry]:
        row = await self._store.query_one(
            "SELECT id, name, date, note, updatedAt FROM entries WHERE id = ?",
            (entry_id,),
        )
        if not row:
            return None
        return _to_entry(row)

    async def create(self, *, name: Any, date: Any, note: Any, updated_at: str) -> int:
        result = await self._store.execute(
            "INSERT INTO entries (name, date, note, updatedAt) VALUES (?, ?, ?, ?)",
            (name, date, note, updated_at),
        )
        return int(result.lastrowid)

    async def update(self, entry_id: int, *, name: Any, date: Any, note: Any, updated_at: str) -> bool:
        result = await self._store.execute(
            "UPDATE entries SET name = ?, date = ?, note = ?, updatedAt = ? WHERE id = ?",
            (name, date, note, updated_at, entry_id),
        )
        return result.rowcount > 0

    async def delete_by_id(self, entry_id: int) -> bool:
        result = await self._store.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
        return result.rowcount > 0
