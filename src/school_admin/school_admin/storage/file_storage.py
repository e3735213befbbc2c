from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Mapping, Optional

from ..core.exceptions import StorageError
from .repository import KeyValueStorage


class JsonFileStorage(KeyValueStorage):
    """One file per key inside a directory.

    Each value is written to a temp file in the same directory and moved into
    place with ``os.replace`` so a reader never sees a half-written value.
    """

    def __init__(self, directory: str | Path):
        self._dir = Path(directory)

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def put_many(self, entries: Mapping[str, str]) -> None:
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            for key, value in entries.items():
                self._write_atomic(self._path(key), value)
        except OSError as e:
            raise StorageError(f"Cannot write to {self._dir}: {e}") from e

    def _write_atomic(self, path: Path, value: str) -> None:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}-", suffix=".tmp", dir=str(self._dir))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
