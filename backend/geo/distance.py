"""geo/distance.py — Great-circle distance and distance-aware event transforms.

Pure, stateless functions over (events, user location); nothing here does
I/O or keeps state, so the client layer can compose them freely.

Public API
----------
calculate_distance(lat1, lon1, lat2, lon2) -> float     km, one decimal
format_distance(distance_km, unit="km") -> str          "12.3 km" / "7.6 mi"
add_distance_to_events(events, user_location) -> list   attaches .distance
sort_events_by_distance(events) -> list                 nearest first, unknown last

Rounding is half-up to one decimal place (1.25 -> 1.3), not Python's
banker's rounding, so results line up with the browser client.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from schemas.event import EventResponse, LocatedEvent

EARTH_RADIUS_KM = 6371.0
KM_TO_MILES = 0.621371
UNITS = ("km", "mi")


@dataclass(frozen=True)
class UserLocation:
    latitude: float
    longitude: float


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _round_one_decimal(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def _format_number(value: float) -> str:
    """Render 5.0 as "5" and 2.1 as "2.1"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two points in kilometres, rounded to 0.1 km."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return _round_one_decimal(EARTH_RADIUS_KM * c)


def format_distance(distance_km: float, unit: str = "km") -> str:
    """Format a kilometre distance for display.

    Kilometres are shown as given; miles are converted and rounded to 0.1.
    """
    if unit == "km":
        return f"{_format_number(distance_km)} km"
    if unit == "mi":
        miles = _round_one_decimal(distance_km * KM_TO_MILES)
        return f"{_format_number(miles)} mi"
    raise ValueError(f"Unknown distance unit {unit!r}; expected one of {UNITS}")


def add_distance_to_events(
    events: Sequence[EventResponse],
    user_location: Optional[UserLocation],
) -> list[EventResponse]:
    """Attach a distance from the user to every event that has coordinates.

    Without a user location the events come back unchanged. Events lacking
    either coordinate are passed through without a distance.
    """
    if user_location is None:
        return list(events)

    located: list[EventResponse] = []
    for event in events:
        if not event.has_coordinates:
            located.append(event)
            continue
        distance = calculate_distance(
            user_location.latitude,
            user_location.longitude,
            event.latitude,
            event.longitude,
        )
        located.append(LocatedEvent.model_validate({**event.model_dump(), "distance": distance}))
    return located


def sort_events_by_distance(events: Sequence[EventResponse]) -> list[EventResponse]:
    """Stable ascending sort by distance; events without one keep their order at the end."""
    return sorted(
        events,
        key=lambda e: (
            getattr(e, "distance", None) is None,
            getattr(e, "distance", None) or 0.0,
        ),
    )
