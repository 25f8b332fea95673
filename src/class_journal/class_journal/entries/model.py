from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Entry:
    """Freeform journal entry kept for older clients."""

    entry_id: int
    name: Optional[str]
    date: Optional[str]
    note: Optional[str]
    updated_at: Optional[str]

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "name": self.name,
            "date": self.date,
            "note": self.note,
            "updatedAt": self.updated_at,
        }
