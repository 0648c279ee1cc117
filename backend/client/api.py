"""client/api.py — HTTP client for the Event Discovery API.

Every call either returns parsed schema objects or raises EventsAPIError with
a message fit for display: the server's own {"message": ...} when it sent
one, otherwise a per-operation fallback.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

import requests
from pydantic import ValidationError

from schemas.event import EventCreate, EventResponse

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network response was not ok"


class EventsAPIError(Exception):
    """A failed API call, with a human-readable message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _parse_event(data: Any) -> EventResponse:
    try:
        return EventResponse.model_validate(data)
    except ValidationError as e:
        raise EventsAPIError(f"Invalid event in API response: {e.error_count()} problem(s)") from e


class EventsAPIClient:
    """Thin wrapper over requests.Session for the /api/events endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    def list_events(
        self,
        location: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[EventResponse]:
        params = {}
        if location:
            params["location"] = location
        if search:
            params["search"] = search

        data = self._request("GET", "/api/events", params=params, fallback=NETWORK_ERROR_MESSAGE)
        if not isinstance(data, list):
            raise EventsAPIError("API response must be a list of events")
        return [_parse_event(item) for item in data]

    def get_event(self, event_id: Union[int, str]) -> EventResponse:
        data = self._request("GET", f"/api/events/{event_id}", fallback="Failed to load event")
        return _parse_event(data)

    def create_event(self, event: Union[EventCreate, Mapping[str, Any]]) -> EventResponse:
        """POST a new event. Accepts an EventCreate or a mapping of its fields."""
        if not isinstance(event, EventCreate):
            try:
                event = EventCreate.model_validate(dict(event))
            except ValidationError as e:
                raise EventsAPIError(f"Invalid event data: {e.error_count()} problem(s)") from e
        payload = event.model_dump(by_alias=True, exclude_none=True)
        data = self._request("POST", "/api/events", json=payload, fallback="Failed to create event")
        return _parse_event(data)

    def register(self, event_id: Union[int, str]) -> EventResponse:
        data = self._request("PUT", f"/api/events/{event_id}/register", fallback="Failed to register")
        return _parse_event(data)

    def health(self) -> dict:
        return self._request("GET", "/health", fallback="Health check failed")

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
        fallback: str,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method, url, params=params or None, json=json, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(
                "events API unreachable",
                extra={"method": method, "url": url, "error": str(e)},
            )
            raise EventsAPIError(f"Could not reach the events API: {e}") from e

        if not response.ok:
            message = self._error_message(response) or fallback
            logger.warning(
                "events API returned an error",
                extra={"method": method, "url": url, "status_code": response.status_code, "detail": message},
            )
            raise EventsAPIError(message, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise EventsAPIError("Invalid JSON in API response", response.status_code) from e

    @staticmethod
    def _error_message(response: requests.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            return body["message"]
        return None
