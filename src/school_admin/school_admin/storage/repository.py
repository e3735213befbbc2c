from __future__ import annotations

from typing import Mapping, Optional, Protocol


class KeyValueStorage(Protocol):
    """Durable key-value medium behind the state store.

    Note (DIP): the store depends on this interface, never on a concrete backend.
    Backends raise StorageError (or OSError) when the medium is unavailable.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def put_many(self, entries: Mapping[str, str]) -> None:
        """Write every entry as one whole-snapshot update."""

        raise NotImplementedError
