"""client/browser.py — Data-fetch orchestration for the event client.

EventBrowser ties the API client, location acquisition and the pure distance
transforms together. Location lookup runs on a background thread, started
before the events request goes out, so it never delays the fetch itself.

Every operation returns a result object that carries either data or a
display-ready error string; nothing here raises on API or network failure,
and nothing is retried.

Usage:
    with EventBrowser.from_settings(ClientSettings()) as browser:
        listing = browser.load_events(location="miami")
        if listing.error:
            print("Error:", listing.error)
"""

from __future__ import annotations

import concurrent.futures
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from client.api import EventsAPIClient, EventsAPIError
from client.config import ClientSettings
from client.location import (
    DEFAULT_MAX_AGE,
    DEFAULT_TIMEOUT,
    LocationCache,
    LocationProvider,
    NullLocationProvider,
    acquire_user_location,
    provider_from_settings,
)
from geo.distance import UserLocation, add_distance_to_events, sort_events_by_distance
from schemas.event import EventResponse

logger = logging.getLogger(__name__)

REGISTERED_MESSAGE = "Successfully registered for the event!"
CREATED_MESSAGE = "Event created"
LOCATION_UNAVAILABLE_MESSAGE = "Could not determine your location"


@dataclass
class EventListing:
    events: list[EventResponse] = field(default_factory=list)
    error: Optional[str] = None
    user_location: Optional[UserLocation] = None
    sorted_by_distance: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class EventResult:
    event: Optional[EventResponse] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class EventBrowser:
    """Client-side view of the event catalogue."""

    def __init__(
        self,
        api: EventsAPIClient,
        location_provider: Optional[LocationProvider] = None,
        *,
        location_timeout: float = DEFAULT_TIMEOUT,
        location_max_age: float = DEFAULT_MAX_AGE,
    ):
        self.api = api
        self.location_provider = location_provider or NullLocationProvider()
        self.location_timeout = location_timeout
        self._cache = LocationCache(max_age=location_max_age)
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="locate"
        )
        self._lock = threading.Lock()
        self._location_future: Optional[concurrent.futures.Future] = None

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "EventBrowser":
        return cls(
            EventsAPIClient(settings.api_url, timeout=settings.api_timeout),
            provider_from_settings(settings),
            location_timeout=settings.location_timeout,
            location_max_age=settings.location_max_age,
        )

    def __enter__(self) -> "EventBrowser":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._executor.shutdown(wait=False)
        self.api.close()

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------

    def start_locating(self) -> concurrent.futures.Future:
        """Kick off a background location lookup unless one is already running."""
        with self._lock:
            if self._location_future is None or self._location_future.done():
                self._location_future = self._executor.submit(
                    acquire_user_location,
                    self.location_provider,
                    timeout=self.location_timeout,
                    cache=self._cache,
                )
            return self._location_future

    def user_location(self, wait: bool = True) -> Optional[UserLocation]:
        """The user's position, or None.

        With wait=False an unfinished lookup counts as "no location yet"; the
        lookup keeps running and its result is cached for the next call.
        """
        future = self.start_locating()
        if not wait and not future.done():
            return self._cache.get()
        return future.result()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def load_events(
        self,
        location: Optional[str] = None,
        search: Optional[str] = None,
        sort_by_distance: Optional[bool] = None,
        wait_for_location: bool = True,
    ) -> EventListing:
        """Fetch, annotate with distance and optionally sort events.

        sort_by_distance=None means "sort whenever a location is known".
        """
        self.start_locating()
        try:
            events = self.api.list_events(location=location, search=search)
        except EventsAPIError as e:
            return EventListing(error=e.message)

        user_location = self.user_location(wait=wait_for_location)
        events = add_distance_to_events(events, user_location)

        if sort_by_distance is None:
            sort_by_distance = user_location is not None
        should_sort = bool(sort_by_distance) and user_location is not None
        if should_sort:
            events = sort_events_by_distance(events)

        logger.debug(
            "events loaded",
            extra={"count": len(events), "located": user_location is not None, "sorted": should_sort},
        )
        return EventListing(
            events=events,
            user_location=user_location,
            sorted_by_distance=should_sort,
        )

    def load_event(self, event_id: Union[int, str], wait_for_location: bool = True) -> EventResult:
        self.start_locating()
        try:
            event = self.api.get_event(event_id)
        except EventsAPIError as e:
            return EventResult(error=e.message)
        [event] = add_distance_to_events([event], self.user_location(wait=wait_for_location))
        return EventResult(event=event)

    def register(self, event_id: Union[int, str]) -> EventResult:
        try:
            event = self.api.register(event_id)
        except EventsAPIError as e:
            return EventResult(error=e.message)
        return EventResult(event=event, message=REGISTERED_MESSAGE)

    def create_event(self, data: Mapping[str, Any], use_current_location: bool = False) -> EventResult:
        """Create an event. With use_current_location the user's position
        replaces any latitude/longitude in `data`; no position means no request.
        """
        if use_current_location:
            here = self.user_location()
            if here is None:
                return EventResult(error=LOCATION_UNAVAILABLE_MESSAGE)
            data = {**data, "latitude": here.latitude, "longitude": here.longitude}
        try:
            event = self.api.create_event(data)
        except EventsAPIError as e:
            return EventResult(error=e.message)
        return EventResult(event=event, message=CREATED_MESSAGE)
