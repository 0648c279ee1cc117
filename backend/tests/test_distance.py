"""
Unit tests for geo/distance.py — Haversine distance and event transforms.

Pure functions, no I/O.

Run from the project root:
    pytest backend/tests/test_distance.py -v
"""

import pytest

from geo import (
    UserLocation,
    add_distance_to_events,
    calculate_distance,
    format_distance,
    sort_events_by_distance,
)
from geo.distance import _round_one_decimal

MIAMI = (25.7617, -80.1918)
MIAMI_ART_FAIR = (25.7743, -80.1937)
NEW_YORK = (40.7128, -74.0060)
SAN_FRANCISCO = (37.7749, -122.4194)


# ---------------------------------------------------------------------------
# calculate_distance
# ---------------------------------------------------------------------------

class TestCalculateDistance:

    def test_same_point_is_zero(self):
        assert calculate_distance(25.7617, -80.1918, 25.7617, -80.1918) == 0.0

    @pytest.mark.parametrize("a, b", [(MIAMI, NEW_YORK), (NEW_YORK, SAN_FRANCISCO), (MIAMI, MIAMI_ART_FAIR)])
    def test_symmetric(self, a, b):
        assert calculate_distance(*a, *b) == calculate_distance(*b, *a)

    def test_short_hop_within_miami(self):
        assert calculate_distance(*MIAMI, *MIAMI_ART_FAIR) == 1.4

    def test_miami_to_new_york(self):
        assert 1740 < calculate_distance(*MIAMI, *NEW_YORK) < 1775

    def test_rounded_to_one_decimal(self):
        d = calculate_distance(*NEW_YORK, *SAN_FRANCISCO)
        assert round(d, 1) == d

    def test_rounding_is_half_up(self):
        assert _round_one_decimal(1.25) == 1.3
        assert _round_one_decimal(0.05) == 0.1
        assert _round_one_decimal(2.04) == 2.0


# ---------------------------------------------------------------------------
# format_distance
# ---------------------------------------------------------------------------

class TestFormatDistance:

    def test_kilometres_are_shown_as_given(self):
        assert format_distance(3.454) == "3.454 km"
        assert format_distance(12.3, "km") == "12.3 km"

    def test_whole_numbers_drop_the_decimal(self):
        assert format_distance(5.0) == "5 km"
        assert format_distance(0.0, "mi") == "0 mi"

    def test_miles_converted_and_rounded(self):
        assert format_distance(3.454, "mi") == "2.1 mi"
        assert format_distance(100, "mi") == "62.1 mi"

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            format_distance(1.0, "furlongs")


# ---------------------------------------------------------------------------
# add_distance_to_events / sort_events_by_distance
# ---------------------------------------------------------------------------

class TestAddDistance:

    def test_without_location_events_are_unchanged(self, make_event):
        events = [make_event(1, latitude=1.0, longitude=1.0), make_event(2)]
        assert add_distance_to_events(events, None) == events

    def test_events_with_coordinates_get_distance(self, make_event):
        events = [
            make_event(1, latitude=MIAMI_ART_FAIR[0], longitude=MIAMI_ART_FAIR[1]),
            make_event(2),                                  # online, no coordinates
            make_event(3, latitude=NEW_YORK[0]),            # only one coordinate
        ]
        located = add_distance_to_events(events, UserLocation(*MIAMI))

        assert located[0].distance == 1.4
        assert getattr(located[1], "distance", None) is None
        assert getattr(located[2], "distance", None) is None
        assert [e.id for e in located] == [1, 2, 3]

    def test_input_is_not_mutated(self, make_event):
        event = make_event(1, latitude=NEW_YORK[0], longitude=NEW_YORK[1])
        add_distance_to_events([event], UserLocation(*MIAMI))
        assert getattr(event, "distance", None) is None


class TestSortByDistance:

    def test_nearest_first_unknown_last(self, make_event):
        events = [make_event(1, distance=5), make_event(2), make_event(3, distance=2)]
        assert [e.id for e in sort_events_by_distance(events)] == [3, 1, 2]

    def test_unknown_distances_keep_their_order(self, make_event):
        events = [make_event(1), make_event(2, distance=9.5), make_event(3), make_event(4)]
        assert [e.id for e in sort_events_by_distance(events)] == [2, 1, 3, 4]

    def test_stable_for_equal_distances(self, make_event):
        events = [make_event(1, distance=3), make_event(2, distance=1), make_event(3, distance=3)]
        assert [e.id for e in sort_events_by_distance(events)] == [2, 1, 3]

    def test_zero_distance_sorts_first(self, make_event):
        events = [make_event(1, distance=0.4), make_event(2, distance=0.0)]
        assert [e.id for e in sort_events_by_distance(events)] == [2, 1]

    def test_full_pipeline_from_miami(self, make_event):
        events = [
            make_event(1, latitude=NEW_YORK[0], longitude=NEW_YORK[1]),
            make_event(2),
            make_event(3, latitude=MIAMI_ART_FAIR[0], longitude=MIAMI_ART_FAIR[1]),
            make_event(4, latitude=SAN_FRANCISCO[0], longitude=SAN_FRANCISCO[1]),
        ]
        ordered = sort_events_by_distance(add_distance_to_events(events, UserLocation(*MIAMI)))
        assert [e.id for e in ordered] == [3, 1, 4, 2]
