"""api/routers/events.py — Event endpoints.

Routes (mounted under /api/events):
    GET  /api/events                  List; filters: location, search (case-insensitive)
    GET  /api/events/{id}             Single event
    POST /api/events                  Create an event (201)
    PUT  /api/events/{id}/register    Take one seat on an event

Errors are raised as store.errors exceptions and rendered by the handler in
api/main.py as {"message": ...} with the matching status code.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_store
from schemas.event import EventCreate, EventResponse
from schemas.shared import ErrorResponse
from store import EventNotFoundError, EventStore, parse_integer, validate_new_event

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Event not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input or event full"}}


def _parse_event_id(raw: str) -> int:
    """Path ids are parsed by hand: anything but a plain ASCII integer matches no event."""
    try:
        return parse_integer(raw)
    except ValueError:
        raise EventNotFoundError(raw) from None


@router.get(
    "",
    response_model=list[EventResponse],
    response_model_exclude_none=True,
    summary="List events",
)
def list_events(
    location: str | None = Query(None, description="Partial, case-insensitive location match (e.g. 'miami')"),
    search: str | None = Query(None, description="Partial match on title, description or location"),
    store: EventStore = Depends(get_store),
):
    events = store.list_events(location=location, search=search)
    logger.debug(
        "events listed",
        extra={"location": location, "search": search, "matches": len(events)},
    )
    return [EventResponse.model_validate(e) for e in events]


@router.get(
    "/{event_id}",
    response_model=EventResponse,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
    summary="Get event",
)
def get_event(event_id: str, store: EventStore = Depends(get_store)):
    event = store.get_event(_parse_event_id(event_id))
    return EventResponse.model_validate(event)


@router.post(
    "",
    status_code=201,
    response_model=EventResponse,
    response_model_exclude_none=True,
    responses=_BAD_REQUEST,
    summary="Create event",
)
def create_event(payload: EventCreate, store: EventStore = Depends(get_store)):
    new_event = validate_new_event(payload.model_dump())
    event = store.create_event(new_event)
    return EventResponse.model_validate(event)


@router.put(
    "/{event_id}/register",
    response_model=EventResponse,
    response_model_exclude_none=True,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Register for event",
)
def register_for_event(event_id: str, store: EventStore = Depends(get_store)):
    event = store.register(_parse_event_id(event_id))
    return EventResponse.model_validate(event)
