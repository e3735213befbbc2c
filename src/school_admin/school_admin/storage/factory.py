from __future__ import annotations

from pathlib import Path

from .connection import DBConfig, DatabaseConnection
from .file_storage import JsonFileStorage
from .memory_storage import InMemoryStorage
from .mysql_storage import MySQLKeyValueStorage
from .repository import KeyValueStorage


def build_storage(backend: str, *, storage_dir: str | Path = "data", db_config: dict | None = None) -> KeyValueStorage:
    """Factory: choose the storage backend by name (memory | file | mysql)."""

    name = (backend or "file").strip().lower()
    if name == "memory":
        return InMemoryStorage()
    if name == "file":
        return JsonFileStorage(storage_dir)
    if name == "mysql":
        return MySQLKeyValueStorage(DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {})))
    raise ValueError(f"Unknown storage backend: {backend!r}")
