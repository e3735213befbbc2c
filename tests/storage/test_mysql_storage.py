from __future__ import annotations

import mysql.connector
import pytest

from src.school_admin.school_admin.core.exceptions import StorageError
from src.school_admin.school_admin.storage.mysql_storage import MySQLKeyValueStorage


class FakeCursor:
    def __init__(self, rows, fail_with=None):
        self._rows = rows
        self._fail_with = fail_with
        self.executed = []
        self.closed = False

    def execute(self, sql, params=None):
        if self._fail_with:
            raise self._fail_with
        self.executed.append((sql, params))

    def executemany(self, sql, seq):
        if self._fail_with:
            raise self._fail_with
        self.executed.append((sql, list(seq)))
        for key, value in seq:
            self._rows[key] = value

    def fetchone(self):
        sql, params = self.executed[-1]
        value = self._rows.get(params[0])
        return (value,) if value is not None else None

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, rows, fail_with=None):
        self.cur = FakeCursor(rows, fail_with)
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self):
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, fail_with=None):
        self.rows = {}
        self.fail_with = fail_with
        self.connections = []

    def connect(self):
        conn = FakeConnection(self.rows, self.fail_with)
        self.connections.append(conn)
        return conn


def test_put_many_upserts_in_one_committed_transaction():
    factory = FakeConnectionFactory()
    storage = MySQLKeyValueStorage(factory)

    storage.put_many({"cc_students": "[]", "cc_school_logo": "logo"})

    assert len(factory.connections) == 1
    conn = factory.connections[0]
    sql, rows = conn.cur.executed[0]
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert rows == [("cc_students", "[]"), ("cc_school_logo", "logo")]
    assert conn.committed and conn.cur.closed and conn.closed
    assert storage.get("cc_school_logo") == "logo"
    assert storage.get("cc_events") is None


def test_empty_snapshot_opens_no_connection():
    factory = FakeConnectionFactory()

    MySQLKeyValueStorage(factory).put_many({})

    assert factory.connections == []


def test_driver_errors_roll_back_and_become_storage_errors():
    factory = FakeConnectionFactory(fail_with=mysql.connector.Error("server gone away"))
    storage = MySQLKeyValueStorage(factory)

    with pytest.raises(StorageError):
        storage.put_many({"cc_students": "[]"})
    with pytest.raises(StorageError):
        storage.get("cc_students")

    assert all(c.rolled_back and not c.committed and c.closed for c in factory.connections)
