"""Python client for the Event Discovery API: HTTP calls, location, distance sorting."""

from .api import EventsAPIClient, EventsAPIError
from .browser import EventBrowser, EventListing, EventResult
from .config import ClientSettings
from .location import (
    FixedLocationProvider,
    IPGeolocationProvider,
    LocationCache,
    LocationProvider,
    LocationUnavailable,
    NullLocationProvider,
    acquire_user_location,
)

__all__ = [
    "EventsAPIClient",
    "EventsAPIError",
    "EventBrowser",
    "EventListing",
    "EventResult",
    "ClientSettings",
    "FixedLocationProvider",
    "IPGeolocationProvider",
    "LocationCache",
    "LocationProvider",
    "LocationUnavailable",
    "NullLocationProvider",
    "acquire_user_location",
]
