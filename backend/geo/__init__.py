"""Distance helpers shared by the client layer and the CLI."""

from .distance import (
    EARTH_RADIUS_KM,
    KM_TO_MILES,
    UNITS,
    UserLocation,
    add_distance_to_events,
    calculate_distance,
    format_distance,
    sort_events_by_distance,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "KM_TO_MILES",
    "UNITS",
    "UserLocation",
    "add_distance_to_events",
    "calculate_distance",
    "format_distance",
    "sort_events_by_distance",
]
