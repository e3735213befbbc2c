from __future__ import annotations

from typing import Mapping, Optional

from .repository import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def put_many(self, entries: Mapping[str, str]) -> None:
        self._data.update(entries)
        self.writes += 1

    def as_dict(self) -> dict[str, str]:
        return dict(self._data)
