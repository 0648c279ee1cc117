"""client/location.py — Acquire the user's position for distance sorting.

A LocationProvider answers "where am I?"; acquire_user_location() wraps any
provider with a hard timeout (5 s by default) and a short-lived cache (5 min
by default), and turns every failure into None. Callers treat a missing
location as the normal "no distance" case, never as an error.

Providers:
    IPGeolocationProvider   HTTP lookup of the caller's public IP (requests)
    FixedLocationProvider   configured coordinates
    NullLocationProvider    location disabled
"""

from __future__ import annotations

import concurrent.futures
import logging
import threading
import time
from typing import Callable, Optional

import requests

from client.config import ClientSettings
from geo.distance import UserLocation

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0      # seconds
DEFAULT_MAX_AGE = 300.0    # seconds (5 minutes)


class LocationUnavailable(Exception):
    """The provider could not (or would not) produce a position."""


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------

class LocationProvider:
    name = "base"

    def current_position(self, timeout: float) -> UserLocation:
        raise NotImplementedError


class NullLocationProvider(LocationProvider):
    name = "none"

    def current_position(self, timeout: float) -> UserLocation:
        raise LocationUnavailable("location lookup is disabled")


class FixedLocationProvider(LocationProvider):
    name = "fixed"

    def __init__(self, latitude: float, longitude: float):
        self.location = UserLocation(latitude=latitude, longitude=longitude)

    def current_position(self, timeout: float) -> UserLocation:
        return self.location


class IPGeolocationProvider(LocationProvider):
    """Resolve the caller's approximate position from its public IP address.

    Understands both the ip-api.com shape ({"status", "lat", "lon"}) and the
    more common {"latitude", "longitude"} shape.
    """

    name = "ip"

    def __init__(self, url: str = "http://ip-api.com/json/", session: Optional[requests.Session] = None):
        self.url = url
        self.session = session or requests.Session()

    def current_position(self, timeout: float) -> UserLocation:
        response = self.session.get(self.url, timeout=timeout)
        response.raise_for_status()
        body = response.json()

        if body.get("status") == "fail":
            raise LocationUnavailable(body.get("message") or "IP lookup failed")

        lat = body.get("lat", body.get("latitude"))
        lon = body.get("lon", body.get("longitude"))
        if lat is None or lon is None:
            raise LocationUnavailable("IP lookup returned no coordinates")
        return UserLocation(latitude=float(lat), longitude=float(lon))


def provider_from_settings(settings: ClientSettings) -> LocationProvider:
    if settings.location_provider == "fixed":
        if settings.location_latitude is None or settings.location_longitude is None:
            logger.warning("fixed location provider selected without coordinates; location disabled")
            return NullLocationProvider()
        return FixedLocationProvider(settings.location_latitude, settings.location_longitude)
    if settings.location_provider == "ip":
        return IPGeolocationProvider(settings.location_lookup_url)
    return NullLocationProvider()


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------

class LocationCache:
    """Holds the last good fix for max_age seconds."""

    def __init__(self, max_age: float = DEFAULT_MAX_AGE, clock: Callable[[], float] = time.monotonic):
        self.max_age = max_age
        self._clock = clock
        self._lock = threading.Lock()
        self._location: Optional[UserLocation] = None
        self._stored_at = 0.0

    def get(self) -> Optional[UserLocation]:
        with self._lock:
            if self._location is None:
                return None
            if self._clock() - self._stored_at > self.max_age:
                self._location = None
                return None
            return self._location

    def put(self, location: UserLocation) -> None:
        with self._lock:
            self._location = location
            self._stored_at = self._clock()

    def clear(self) -> None:
        with self._lock:
            self._location = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def acquire_user_location(
    provider: LocationProvider,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    cache: Optional[LocationCache] = None,
) -> Optional[UserLocation]:
    """Return the user's position, or None if it cannot be had within `timeout`."""
    if cache is not None:
        cached = cache.get()
        if cached is not None:
            return cached

    executor = concurrent.futures.ThreadPoolExecutor(max_workers=1, thread_name_prefix="location")
    future = executor.submit(provider.current_position, timeout)
    try:
        location = future.result(timeout=timeout)
    except concurrent.futures.TimeoutError:
        logger.warning(
            "location lookup timed out",
            extra={"provider": provider.name, "timeout_s": timeout},
        )
        return None
    except Exception as e:
        # Any provider failure (denied, unsupported, network, bad payload)
        # degrades to "no location".
        logger.warning(
            "location unavailable",
            extra={"provider": provider.name, "error": f"{type(e).__name__}: {e}"},
        )
        return None
    finally:
        executor.shutdown(wait=False)

    if cache is not None:
        cache.put(location)
    return location
