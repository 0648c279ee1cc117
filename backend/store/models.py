"""store/models.py — Domain records held by the event store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Event:
    """A schedulable activity with capacity and optional geolocation."""

    id: int
    title: str
    description: str
    location: str
    date: str
    max_participants: int
    current_participants: int = 0
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def is_full(self) -> bool:
        return self.current_participants >= self.max_participants

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class NewEvent:
    """Validated input for EventStore.create_event (no id, no counters yet)."""

    title: str
    location: str
    date: str
    max_participants: int
    description: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
