from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Entry


class EntryRepository(Protocol):
    async def list_desc(self) -> Sequence[Entry]:
        raise NotImplementedError

    async def get_by_id(self, entry_id: int) -> Optional[Entry]:
        raise NotImplementedError

    async def create(self, *, name: Any, date: Any, note: Any, updated_at: str) -> int:
        raise NotImplementedError

    async def update(self, entry_id: int, *, name: Any, date: Any, note: Any, updated_at: str) -> bool:
        raise NotImplementedError

    async def delete_by_id(self, entry_id: int) -> bool:
        raise NotImplementedError
