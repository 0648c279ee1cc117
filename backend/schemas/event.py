"""schemas/event.py — Event request/response schemas.

Wire names are camelCase (maxParticipants, currentParticipants); Python
attributes are snake_case. Both spellings are accepted on input.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel


class EventCreate(BaseModel):
    """POST /api/events body.

    Deliberately loose: every field is optional here so that missing or falsy
    values reach store.validation and produce the "Missing required fields"
    message rather than a schema error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    title: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    location: Optional[StrictStr] = None
    latitude: Optional[Union[StrictInt, StrictFloat]] = None
    longitude: Optional[Union[StrictInt, StrictFloat]] = None
    date: Optional[StrictStr] = None
    max_participants: Optional[Union[StrictInt, StrictFloat, StrictStr]] = None


class EventResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    title: str
    description: str = ""
    location: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    date: str
    max_participants: int
    current_participants: int = 0

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def spots_left(self) -> int:
        return max(self.max_participants - self.current_participants, 0)


class LocatedEvent(EventResponse):
    """Event as seen by the client, with an optional distance from the user (km)."""
    distance: Optional[float] = None
