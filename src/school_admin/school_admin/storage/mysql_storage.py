from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabaseConnection
from .repository import KeyValueStorage

KV_TABLE = "kv_store"


@contextmanager
def transaction(conn_factory: DatabaseConnection) -> Iterator:
    """Cursor inside one transaction: commit on success, rollback on any error."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        try:
            yield cur
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cur.close()
    finally:
        conn.close()


class MySQLKeyValueStorage(KeyValueStorage):
    """Key-value rows in a single MySQL table; a snapshot is written in one transaction."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        try:
            with transaction(self._conn_factory) as cur:
                cur.execute(f"SELECT store_value FROM {KV_TABLE} WHERE store_key=%s", (key,))
                row = cur.fetchone()
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot read {key!r}: {e}") from e
        return row[0] if row else None

    def put_many(self, entries: Mapping[str, str]) -> None:
        if not entries:
            return
        try:
            with transaction(self._conn_factory) as cur:
                cur.executemany(
                    f"""
                    INSERT INTO {KV_TABLE}(store_key, store_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                    """,
                    list(entries.items()),
                )
        except mysql.connector.Error as e:
            raise StorageError(f"Cannot write snapshot: {e}") from e
