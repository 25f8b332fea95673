from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def iso_timestamp(value: datetime | None = None) -> str:
    """ISO-8601 string with millisecond precision and a trailing 'Z'."""
    value = value or now_utc()
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
