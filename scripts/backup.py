"""Backup the stored school state as one JSON file under backups/."""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_admin.school_admin.storage.factory import build_storage
from src.school_admin.school_admin.store.store import SchoolStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(
        getattr(settings, "STORAGE_BACKEND", "file"),
        storage_dir=getattr(settings, "STORAGE_DIR", "data"),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    store = SchoolStore(storage)

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"school_admin_{ts}.json"
    out_file.write_text(json.dumps(store.snapshot(), indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
