from schemas.shared import ErrorResponse, HealthResponse, StoreHealthResponse
from schemas.event import EventCreate, EventResponse, LocatedEvent

__all__ = [
    "ErrorResponse", "HealthResponse", "StoreHealthResponse",
    "EventCreate", "EventResponse", "LocatedEvent",
]
