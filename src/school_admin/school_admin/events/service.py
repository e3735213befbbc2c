from __future__ import annotations

from typing import Optional

from ..store.store import SchoolStore
from .model import SchoolEvent


class EventService:
    """Use cases: school calendar."""

    def __init__(self, store: SchoolStore):
        self._store = store

    def list_events(self) -> list[SchoolEvent]:
        return list(self._store.state.events)

    def get_event(self, event_id: str) -> Optional[SchoolEvent]:
        return next((e for e in self._store.state.events if e.id == event_id), None)

    def add_event(self, event: SchoolEvent) -> None:
        self._store.replace(events=(*self._store.state.events, event))

    def update_event(self, event: SchoolEvent) -> bool:
        events = self._store.state.events
        if not any(e.id == event.id for e in events):
            return False
        self._store.replace(events=tuple(event if e.id == event.id else e for e in events))
        return True

    def delete_event(self, event_id: str) -> bool:
        events = self._store.state.events
        kept = tuple(e for e in events if e.id != event_id)
        if len(kept) == len(events):
            return False
        self._store.replace(events=kept)
        return True
