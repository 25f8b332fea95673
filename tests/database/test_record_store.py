from __future__ import annotations

import asyncio

import pytest

from src.class_journal.class_journal.core.exceptions import StoreError
from src.class_journal.class_journal.database.connection import DBConfig, DatabaseConnection
from src.class_journal.class_journal.database.sqlite_base import RecordStore


def test_execute_reports_last_id_and_rowcount(container):
    store = container.store

    result = asyncio.run(
        store.execute("INSERT INTO students (name, group_name, course) VALUES (?, ?, ?)", ("Anna", "G", 1))
    )
    assert result.lastrowid == 1
    assert result.rowcount == 1

    row = asyncio.run(store.query_one("SELECT name, group_name FROM students WHERE id = ?", (1,)))
    assert row == {"name": "Anna", "group_name": "G"}
    assert asyncio.run(store.query_one("SELECT id FROM students WHERE id = ?", (2,))) is None
    assert asyncio.run(store.query_many("SELECT id FROM students")) == [{"id": 1}]


def test_constraint_violation_becomes_store_error(container):
    with pytest.raises(StoreError) as exc:
        asyncio.run(container.store.execute("INSERT INTO students (name, group_name, course) VALUES (NULL, 'G', 1)"))
    assert "NOT NULL" in str(exc.value)


def test_malformed_statement_becomes_store_error(container):
    with pytest.raises(StoreError):
        asyncio.run(container.store.query_many("SELEC nonsense"))


def test_foreign_keys_are_enforced(container):
    with pytest.raises(StoreError):
        asyncio.run(
            container.store.execute("INSERT INTO attendance (student_id, date, hour, status) VALUES (99, 'd', -1, 's')")
        )


def test_ping(container, tmp_path):
    assert asyncio.run(container.store.ping()) is True

    broken = RecordStore(DatabaseConnection(DBConfig(path=str(tmp_path))))
    assert asyncio.run(broken.ping()) is False


@pytest.mark.parametrize(
    "params",
    [
        ("Anna", "G", 10**30),
        ("\ud800", "G", 1),
    ],
    ids=["int-too-large", "lone-surrogate"],
)
def test_unbindable_parameters_become_store_error(container, params):
    with pytest.raises(StoreError):
        asyncio.run(container.store.execute("INSERT INTO students (name, group_name, course) VALUES (?, ?, ?)", params))
    assert asyncio.run(container.store.query_many("SELECT id FROM students")) == []


def test_execute_all_commits_every_statement(container):
    results = asyncio.run(
        container.store.execute_all(
            [
                ("INSERT INTO entries (name) VALUES (?)", ("a",)),
                ("INSERT INTO entries (name) VALUES (?)", ("b",)),
            ]
        )
    )
    assert [r.lastrowid for r in results] == [1, 2]
    assert len(asyncio.run(container.store.query_many("SELECT id FROM entries"))) == 2


def test_execute_all_rolls_back_when_a_later_statement_fails(container):
    with pytest.raises(StoreError):
        asyncio.run(
            container.store.execute_all(
                [
                    ("INSERT INTO entries (name) VALUES (?)", ("kept?",)),
                    ("INSERT INTO entries (name) VALUES (?)", (None,)),
                ]
            )
        )
    assert asyncio.run(container.store.query_many("SELECT id FROM entries")) == []
