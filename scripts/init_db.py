"""Create the MySQL database and kv_store table, then report which state keys are stored."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_admin.school_admin.core.constants import STORAGE_KEYS
from src.school_admin.school_admin.storage.bootstrap import ensure_kv_table, list_tables
from src.school_admin.school_admin.storage.connection import DatabaseConnection, DBConfig
from src.school_admin.school_admin.storage.mysql_storage import MySQLKeyValueStorage


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    target = DBConfig.from_dict(dict(settings.DB_CONFIG))

    ensure_kv_table(dict(settings.DB_CONFIG))
    storage = MySQLKeyValueStorage(DatabaseConnection.get_instance(target))
    stored = [key for key in STORAGE_KEYS if storage.get(key) is not None]

    print(f"OK: {target.user}@{target.host}:{target.port}/{target.database} ready")
    print(f"    tables: {', '.join(list_tables(dict(settings.DB_CONFIG)))}")
    print(f"    stored keys: {len(stored)}/{len(STORAGE_KEYS)} (missing keys fall back to built-in defaults)")


if __name__ == "__main__":
    main()
