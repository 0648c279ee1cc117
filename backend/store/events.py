"""store/events.py — In-memory, ordered event store.

One EventStore is built per process at startup (api/main.py lifespan) and
handed to route handlers through api.dependencies.get_store. FastAPI runs
sync handlers on a thread pool, so every read and write goes through a single
lock; registration is an atomic check-and-increment under that lock.

Records handed out are copies: mutating them never changes the store.

Usage:
    store = EventStore.seeded("full")
    miami = store.list_events(location="miami")
    store.register(miami[0].id)
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Iterable, Optional

from store.errors import EventFullError, EventNotFoundError
from store.models import Event, NewEvent
from store.seed import seed_events

logger = logging.getLogger(__name__)


def _contains(haystack: str, needle_lower: str) -> bool:
    return needle_lower in haystack.lower()


class EventStore:
    """Ordered collection of events plus a monotonically increasing id counter."""

    def __init__(self, events: Iterable[Event] = ()):
        self._lock = threading.Lock()
        self._events: list[Event] = [replace(e) for e in events]
        ids = [e.id for e in self._events]
        if len(ids) != len(set(ids)):
            raise ValueError("Seed events must have unique ids")
        self._next_id = max(ids, default=0) + 1

    @classmethod
    def seeded(cls, variant: str = "full") -> "EventStore":
        store = cls(seed_events(variant))
        logger.info(
            "event store seeded",
            extra={"seed_variant": variant, "events": len(store), "next_id": store.next_id},
        )
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def count(self) -> int:
        return len(self)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_events(
        self,
        location: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[Event]:
        """Return events in insertion order, optionally narrowed.

        location: case-insensitive substring of the event location.
        search:   case-insensitive substring of title, description or location.
        Both filters together are ANDed. Empty strings are ignored.
        """
        with self._lock:
            matches = list(self._events)

        if location:
            loc = location.lower()
            matches = [e for e in matches if _contains(e.location, loc)]
        if search:
            term = search.lower()
            matches = [
                e for e in matches
                if _contains(e.title, term)
                or _contains(e.description, term)
                or _contains(e.location, term)
            ]
        return [replace(e) for e in matches]

    def get_event(self, event_id: int) -> Event:
        with self._lock:
            return replace(self._find(event_id))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_event(self, new_event: NewEvent) -> Event:
        """Append a new event with the next id and zero participants."""
        with self._lock:
            event = Event(
                id=self._next_id,
                title=new_event.title,
                description=new_event.description,
                location=new_event.location,
                latitude=new_event.latitude,
                longitude=new_event.longitude,
                date=new_event.date,
                max_participants=new_event.max_participants,
                current_participants=0,
            )
            self._next_id += 1
            self._events.append(event)
            created = replace(event)

        logger.info(
            "event created",
            extra={"event_id": created.id, "title": created.title, "max_participants": created.max_participants},
        )
        return created

    def register(self, event_id: int) -> Event:
        """Take one seat on an event. Not idempotent: each call takes another seat."""
        with self._lock:
            event = self._find(event_id)
            if event.is_full:
                logger.warning(
                    "registration rejected: event full",
                    extra={"event_id": event_id, "max_participants": event.max_participants},
                )
                raise EventFullError(event_id)
            event.current_participants += 1
            updated = replace(event)

        logger.info(
            "registration accepted",
            extra={
                "event_id": event_id,
                "current_participants": updated.current_participants,
                "max_participants": updated.max_participants,
            },
        )
        return updated

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _find(self, event_id: int) -> Event:
        # Caller holds the lock.
        for event in self._events:
            if event.id == event_id:
                return event
        raise EventNotFoundError(event_id)
