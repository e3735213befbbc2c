"""Write the built-in demo data to the configured storage backend.

Existing values are overwritten.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_admin.school_admin.storage.factory import build_storage
from src.school_admin.school_admin.store.seed import default_state
from src.school_admin.school_admin.store.state import encode_state


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = getattr(settings, "STORAGE_BACKEND", "file")
    storage = build_storage(
        backend,
        storage_dir=getattr(settings, "STORAGE_DIR", "data"),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    storage.put_many(encode_state(default_state()))
    print(f"OK: Seeded {backend} storage")


if __name__ == "__main__":
    main()
