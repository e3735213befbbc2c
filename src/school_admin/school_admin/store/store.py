from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Callable, Optional

from ..core.constants import DEFAULT_SYNC_WINDOW_SECONDS, STORAGE_KEYS
from ..core.exceptions import StorageError
from ..storage.repository import KeyValueStorage
from .seed import default_state
from .state import SchoolState, decode_state, encode_state

logger = logging.getLogger(__name__)

Listener = Callable[[SchoolState], None]


class SchoolStore:
    """Sole owner of the school's collections.

    Every accepted change replaces the in-memory state first and then writes a
    full snapshot of all seven entries to storage. Storage failures are logged
    and swallowed: the in-memory state stays authoritative for the process.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        defaults: Optional[SchoolState] = None,
        sync_window_seconds: float = DEFAULT_SYNC_WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._storage = storage
        self._sync_window = float(sync_window_seconds)
        self._clock = clock
        self._listeners: list[Listener] = []
        self._last_change: Optional[float] = None
        self._state = self._load(defaults if defaults is not None else default_state())

    def _load(self, defaults: SchoolState) -> SchoolState:
        raw: dict[str, Optional[str]] = {}
        for key in STORAGE_KEYS:
            try:
                raw[key] = self._storage.get(key)
            except (StorageError, OSError) as e:
                logger.warning("Cannot read %s from storage (%s); using default", key, e)
                raw[key] = None
        return decode_state(raw, defaults=defaults)

    @property
    def state(self) -> SchoolState:
        return self._state

    @property
    def is_syncing(self) -> bool:
        """True for a short window after any change (user feedback only)."""

        if self._last_change is None:
            return False
        return self._clock() - self._last_change < self._sync_window

    def apply(self, change: Callable[[SchoolState], SchoolState]) -> SchoolState:
        """Run ``change`` against the current state and commit its result.

        Returning the same state object means "nothing changed": no write and
        no notification happen.
        """

        new_state = change(self._state)
        if new_state is self._state:
            return self._state

        self._state = new_state
        self._last_change = self._clock()
        self.flush()
        self._notify()
        return new_state

    def replace(self, **fields) -> SchoolState:
        return self.apply(lambda s: replace(s, **fields))

    def flush(self) -> bool:
        try:
            self._storage.put_many(encode_state(self._state))
        except (StorageError, OSError) as e:
            logger.warning("Persisting school state failed; keeping in-memory state: %s", e)
            return False
        return True

    def snapshot(self) -> dict[str, str]:
        return encode_state(self._state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("State listener %r failed", listener)
