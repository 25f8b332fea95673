from __future__ import annotations

import asyncio
import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from ..core.exceptions import StoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

Params = Sequence[Any]
Statement = Tuple[str, Params]

# Binding errors raised by the driver before SQLite sees the statement.
_DRIVER_ERRORS = (sqlite3.Error, OverflowError, UnicodeEncodeError)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Tuple[sqlite3.Connection, sqlite3.Cursor]]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur: sqlite3.Cursor) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur: sqlite3.Cursor) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [dict(r) for r in rows or []]


@dataclass(frozen=True)
class ExecResult:
    rowcount: int
    lastrowid: Optional[int]


class RecordStore:
    """Async access to the store: execute / query_one / query_many.

    Each call runs on a worker thread with its own connection, so callers
    suspend instead of blocking the event loop. Driver faults surface as
    ``StoreError``; nothing is retried.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @property
    def path(self) -> str:
        return self._conn_factory.path

    async def execute(self, sql: str, params: Params = ()) -> ExecResult:
        return await asyncio.to_thread(self._run, sql, params, self._exec)

    async def query_one(self, sql: str, params: Params = ()) -> Optional[Dict[str, Any]]:
        return await asyncio.to_thread(self._run, sql, params, fetchone)

    async def query_many(self, sql: str, params: Params = ()) -> List[Dict[str, Any]]:
        return await asyncio.to_thread(self._run, sql, params, fetchall)

    async def execute_all(self, statements: Sequence[Statement]) -> List[ExecResult]:
        """Run several statements in one transaction; all of them or none apply."""

        return await asyncio.to_thread(self._run_all, list(statements))

    async def ping(self) -> bool:
        try:
            await self.query_one("SELECT 1 AS ok")
        except StoreError:
            return False
        return True

    @staticmethod
    def _exec(cur: sqlite3.Cursor) -> ExecResult:
        return ExecResult(rowcount=cur.rowcount, lastrowid=cur.lastrowid)

    def _run(self, sql: str, params: Params, collect):
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql, tuple(params))
                return collect(cur)
        except _DRIVER_ERRORS as e:
            logger.error("Store error: %s | sql=%s", e, " ".join(sql.split()))
            raise StoreError(str(e)) from e

    def _run_all(self, statements: List[Statement]) -> List[ExecResult]:
        sql = ""
        try:
            results = []
            with db_cursor(self._conn_factory) as (_, cur):
                for sql, params in statements:
                    cur.execute(sql, tuple(params))
                    results.append(self._exec(cur))
            return results
        except _DRIVER_ERRORS as e:
            logger.error("Store error: %s | sql=%s", e, " ".join(sql.split()))
            raise StoreError(str(e)) from e
