"""
Unit tests for store/validation.py — parse-and-validate of new-event input.

Run from the project root:
    pytest backend/tests/test_validation.py -v
"""

import math

import pytest

from store import EventValidationError, parse_capacity, parse_integer, validate_new_event


def _data(**overrides):
    data = {
        "title": "Book Club",
        "location": "Boston",
        "date": "2025-12-01T19:00:00",
        "max_participants": 12,
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# parse_capacity
# ---------------------------------------------------------------------------

class TestParseCapacity:
    """parse_capacity(value) -> positive int | EventValidationError."""

    def test_int(self):
        assert parse_capacity(30) == 30

    def test_numeric_string(self):
        assert parse_capacity("50") == 50

    def test_numeric_string_with_whitespace(self):
        assert parse_capacity(" 7 ") == 7

    def test_integral_float(self):
        assert parse_capacity(20.0) == 20

    @pytest.mark.parametrize(
        "value",
        ["abc", "12.5", 12.5, -3, "-1", "0", "1_000", "١٢", "", math.nan, math.inf, True, [5]],
    )
    def test_invalid_values(self, value):
        with pytest.raises(EventValidationError) as exc:
            parse_capacity(value)
        assert exc.value.message == "maxParticipants must be a positive integer"


class TestParseInteger:
    """parse_integer(text): plain ASCII decimal integers only."""

    @pytest.mark.parametrize("text, expected", [("5", 5), (" 12 ", 12), ("+3", 3), ("-4", -4), ("007", 7)])
    def test_plain_integers(self, text, expected):
        assert parse_integer(text) == expected

    @pytest.mark.parametrize("text", ["0_1", "1_000", "١", "１２", "1.5", "1e3", "", " ", "+", "0x10"])
    def test_rejects_everything_else(self, text):
        with pytest.raises(ValueError):
            parse_integer(text)


# ---------------------------------------------------------------------------
# validate_new_event
# ---------------------------------------------------------------------------

class TestValidateNewEvent:

    def test_minimal_valid_input(self):
        new = validate_new_event(_data())
        assert new.title == "Book Club"
        assert new.description == ""
        assert new.max_participants == 12
        assert new.latitude is None and new.longitude is None

    def test_date_is_stored_verbatim(self):
        assert validate_new_event(_data(date="next tuesday")).date == "next tuesday"

    @pytest.mark.parametrize("field", ["title", "location", "date", "max_participants"])
    def test_missing_required_field(self, field):
        data = _data()
        del data[field]
        with pytest.raises(EventValidationError) as exc:
            validate_new_event(data)
        assert exc.value.message == "Missing required fields"

    @pytest.mark.parametrize("field", ["title", "location", "date"])
    def test_empty_string_counts_as_missing(self, field):
        with pytest.raises(EventValidationError) as exc:
            validate_new_event(_data(**{field: ""}))
        assert exc.value.message == "Missing required fields"

    def test_zero_capacity_counts_as_missing(self):
        with pytest.raises(EventValidationError) as exc:
            validate_new_event(_data(max_participants=0))
        assert exc.value.message == "Missing required fields"

    def test_non_numeric_capacity_is_invalid(self):
        with pytest.raises(EventValidationError) as exc:
            validate_new_event(_data(max_participants="lots"))
        assert exc.value.message == "maxParticipants must be a positive integer"

    def test_coordinates_accepted(self):
        new = validate_new_event(_data(latitude=42, longitude=-71.06))
        assert new.latitude == 42.0
        assert new.longitude == -71.06

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("latitude", 90.5, "latitude must be between -90 and 90"),
            ("longitude", -181, "longitude must be between -180 and 180"),
            ("latitude", "north", "latitude must be a number"),
            ("longitude", math.nan, "longitude must be between -180 and 180"),
        ],
    )
    def test_bad_coordinates(self, field, value, message):
        with pytest.raises(EventValidationError) as exc:
            validate_new_event(_data(**{field: value}))
        assert exc.value.message == message

    def test_non_string_title_is_invalid(self):
        with pytest.raises(EventValidationError) as exc:
            validate_new_event(_data(title=123))
        assert exc.value.message == "title must be a string"
