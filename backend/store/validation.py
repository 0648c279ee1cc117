"""store/validation.py — Parse and validate input for a new event.

validate_new_event() turns a loosely typed mapping (the request body after
schema parsing, or CLI arguments) into a NewEvent, raising
EventValidationError with a human-readable message on the first problem.

Rules:
    title, location, date, max_participants  required; None, "" and 0 count
                                             as missing ("Missing required fields")
    max_participants                         int, integral float, or numeric
                                             string; must be >= 1
    latitude / longitude                     optional, finite, within
                                             [-90, 90] / [-180, 180]
    description                              optional, defaults to ""
    date                                     stored verbatim, not parsed
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

from store.errors import EventValidationError
from store.models import NewEvent

REQUIRED_FIELDS = ("title", "location", "date", "max_participants")

_CAPACITY_MESSAGE = "maxParticipants must be a positive integer"

_INTEGER_RE = re.compile(r"\s*([+-]?[0-9]+)\s*", re.ASCII)


def _is_missing(value: Any) -> bool:
    # Mirrors a plain truthiness check on the wire values: None, "" and 0.
    # Booleans are not numbers here and are rejected later as invalid.
    if isinstance(value, bool):
        return False
    return value is None or value == "" or value == 0


def parse_integer(text: str) -> int:
    """Parse a plain decimal integer string: ASCII digits, optional sign.

    Unlike int(), digit-group underscores ("1_000") and non-ASCII digits
    ("١٢") are rejected. Surrounding whitespace is allowed.
    """
    match = _INTEGER_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"not a plain integer: {text!r}")
    return int(match.group(1))


def parse_capacity(value: Any) -> int:
    """Parse maxParticipants into a positive int or raise EventValidationError."""
    if isinstance(value, bool):
        raise EventValidationError(_CAPACITY_MESSAGE)

    if isinstance(value, int):
        capacity = value
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise EventValidationError(_CAPACITY_MESSAGE)
        capacity = int(value)
    elif isinstance(value, str):
        try:
            capacity = parse_integer(value)
        except ValueError:
            raise EventValidationError(_CAPACITY_MESSAGE) from None
    else:
        raise EventValidationError(_CAPACITY_MESSAGE)

    if capacity < 1:
        raise EventValidationError(_CAPACITY_MESSAGE)
    return capacity


def _parse_coordinate(name: str, value: Any, bound: float) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EventValidationError(f"{name} must be a number")
    value = float(value)
    if not math.isfinite(value) or not -bound <= value <= bound:
        raise EventValidationError(f"{name} must be between {-bound:g} and {bound:g}")
    return value


def _require_text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise EventValidationError(f"{name} must be a string")
    return value


def validate_new_event(data: Mapping[str, Any]) -> NewEvent:
    """Validate a snake_case mapping of event fields and build a NewEvent."""
    if any(_is_missing(data.get(field)) for field in REQUIRED_FIELDS):
        raise EventValidationError()

    description = data.get("description")
    if description is None:
        description = ""

    return NewEvent(
        title=_require_text("title", data["title"]),
        location=_require_text("location", data["location"]),
        date=_require_text("date", data["date"]),
        max_participants=parse_capacity(data["max_participants"]),
        description=_require_text("description", description),
        latitude=_parse_coordinate("latitude", data.get("latitude"), 90.0),
        longitude=_parse_coordinate("longitude", data.get("longitude"), 180.0),
    )
