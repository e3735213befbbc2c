"""Schema helpers for the MySQL backend (used by scripts/init_db.py and AUTO_INIT_DB)."""

from __future__ import annotations

from .connection import DatabaseConnection, DBConfig
from .mysql_storage import KV_TABLE, transaction


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def ensure_kv_table(db_config: dict) -> None:
    """Create the key-value table (idempotent: CREATE IF NOT EXISTS)."""

    ensure_database_exists(db_config)
    with transaction(DatabaseConnection(DBConfig.from_dict(db_config))) as cur:
        cur.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {KV_TABLE} (
                store_key VARCHAR(64) NOT NULL PRIMARY KEY,
                store_value LONGTEXT NOT NULL,
                updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
            ) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
            """
        )


def list_tables(db_config: dict) -> list[str]:
    with transaction(DatabaseConnection(DBConfig.from_dict(db_config))) as cur:
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
