"""In-memory event store for the Event Discovery API."""

from .errors import EventFullError, EventNotFoundError, EventStoreError, EventValidationError
from .events import EventStore
from .models import Event, NewEvent
from .seed import SEED_VARIANTS, seed_events
from .validation import parse_capacity, parse_integer, validate_new_event

__all__ = [
    "EventStore",
    "Event",
    "NewEvent",
    "EventStoreError",
    "EventValidationError",
    "EventNotFoundError",
    "EventFullError",
    "SEED_VARIANTS",
    "seed_events",
    "parse_capacity",
    "parse_integer",
    "validate_new_event",
]
