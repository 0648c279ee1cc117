"""store/errors.py — Domain errors raised by the event store.

Each error carries the HTTP status it maps to; the API layer turns them into
JSON `{"message": ...}` bodies in a single exception handler (api/main.py).
"""

from __future__ import annotations


class EventStoreError(Exception):
    """Base class for all store errors."""

    status_code = 500
    default_message = "Event store error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EventValidationError(EventStoreError):
    """Missing or invalid input when creating an event."""

    status_code = 400
    default_message = "Missing required fields"


class EventNotFoundError(EventStoreError):
    status_code = 404
    default_message = "Event not found"

    def __init__(self, event_id: object = None, message: str | None = None):
        self.event_id = event_id
        super().__init__(message)


class EventFullError(EventStoreError):
    """Registration attempted on an event at capacity."""

    status_code = 400
    default_message = "Event is full"

    def __init__(self, event_id: int, message: str | None = None):
        self.event_id = event_id
        super().__init__(message)
