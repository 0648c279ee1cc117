"""
Unit tests for store/events.py and store/seed.py — the in-memory EventStore.

No server required.

Run from the project root:
    pytest backend/tests/test_store.py -v
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from core.config import Settings
from store import (
    Event,
    EventFullError,
    EventNotFoundError,
    EventStore,
    NewEvent,
    seed_events,
)


def _new(title="Book Club", max_participants=3, **kw) -> NewEvent:
    return NewEvent(
        title=title,
        location=kw.pop("location", "Boston"),
        date=kw.pop("date", "2025-12-01T19:00:00"),
        max_participants=max_participants,
        **kw,
    )


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------

class TestSeeding:
    """EventStore.seeded(variant) and seed_events(variant)."""

    def test_full_variant_has_five_events_in_order(self, store):
        assert [e.id for e in store.list_events()] == [1, 2, 3, 4, 5]
        assert store.next_id == 6

    def test_minimal_variant_has_three_events_without_coordinates(self):
        minimal = EventStore.seeded("minimal")
        events = minimal.list_events()
        assert [e.id for e in events] == [1, 2, 3]
        assert not any(e.has_coordinates for e in events)
        assert minimal.next_id == 4

    def test_empty_variant_starts_ids_at_one(self):
        empty = EventStore.seeded("none")
        assert len(empty) == 0
        assert empty.create_event(_new()).id == 1

    def test_seeded_from_settings(self):
        configured = Settings(seed_data="MINIMAL")
        assert len(EventStore.seeded(configured.seed_data)) == 3

    def test_unknown_variant_rejected(self):
        with pytest.raises(ValueError):
            seed_events("huge")

    def test_seed_lists_are_independent(self):
        first = seed_events("full")
        first[0].current_participants = 99
        assert seed_events("full")[0].current_participants == 45

    def test_duplicate_ids_rejected(self):
        e = seed_events("full")[0]
        with pytest.raises(ValueError):
            EventStore([e, e])


# ---------------------------------------------------------------------------
# Listing and filtering
# ---------------------------------------------------------------------------

class TestListEvents:
    """list_events(location=None, search=None)."""

    def test_location_filter_is_case_insensitive_substring(self, store):
        assert [e.id for e in store.list_events(location="Miami")] == [1, 3]
        assert [e.id for e in store.list_events(location="MIAMI")] == [1, 3]
        assert [e.id for e in store.list_events(location="fran")] == [4]

    def test_search_matches_title(self, store):
        assert [e.id for e in store.list_events(search="meetup")] == [2]

    def test_search_matches_description(self, store):
        assert [e.id for e in store.list_events(search="ARTISTS")] == [3]

    def test_search_matches_location(self, store):
        assert [e.id for e in store.list_events(search="new york")] == [5]

    def test_filters_compose_as_and(self, store):
        assert [e.id for e in store.list_events(location="miami", search="art")] == [3]
        assert store.list_events(location="online", search="art") == []

    def test_empty_strings_mean_no_filter(self, store):
        assert len(store.list_events(location="", search="")) == 5

    def test_no_match_returns_empty_list(self, store):
        assert store.list_events(location="Atlantis") == []

    def test_returned_records_are_copies(self, store):
        listed = store.list_events()
        listed[0].current_participants = 0
        listed[0].title = "changed"
        fresh = store.get_event(1)
        assert fresh.current_participants == 45
        assert fresh.title == "React Conference 2025"


# ---------------------------------------------------------------------------
# Get / create
# ---------------------------------------------------------------------------

class TestGetAndCreate:

    def test_get_existing_event(self, store):
        event = store.get_event(4)
        assert isinstance(event, Event)
        assert event.location == "San Francisco"

    def test_get_missing_event_raises_not_found(self, store):
        with pytest.raises(EventNotFoundError) as exc:
            store.get_event(42)
        assert exc.value.status_code == 404
        assert exc.value.message == "Event not found"

    def test_create_assigns_next_id_and_zero_participants(self, store):
        created = store.create_event(_new(description="Monthly"))
        assert created.id == 6
        assert created.current_participants == 0
        assert created.description == "Monthly"
        assert store.next_id == 7

    def test_ids_strictly_increase(self, store):
        ids = [store.create_event(_new(title=f"E{i}")).id for i in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5
        assert min(ids) > 5

    def test_created_event_is_appended_last(self, store):
        created = store.create_event(_new(latitude=42.36, longitude=-71.06))
        assert store.list_events()[-1].id == created.id
        assert store.get_event(created.id).has_coordinates


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

class TestRegister:

    def test_register_increments_by_one(self, store):
        assert store.register(5).current_participants == 23
        assert store.get_event(5).current_participants == 23

    def test_register_until_full_then_rejects(self, store):
        event = store.create_event(_new(max_participants=3))
        counts = [store.register(event.id).current_participants for _ in range(3)]
        assert counts == [1, 2, 3]

        with pytest.raises(EventFullError) as exc:
            store.register(event.id)
        assert exc.value.status_code == 400
        assert exc.value.message == "Event is full"
        assert store.get_event(event.id).current_participants == 3

    def test_register_unknown_event(self, store):
        with pytest.raises(EventNotFoundError):
            store.register(999)

    def test_concurrent_registrations_never_exceed_capacity(self, store):
        """20 threads race for 5 seats: exactly 5 win."""
        event = store.create_event(_new(max_participants=5))

        def attempt(_):
            try:
                store.register(event.id)
                return True
            except EventFullError:
                return False

        with ThreadPoolExecutor(max_workers=20) as executor:
            results = list(executor.map(attempt, range(20)))

        assert results.count(True) == 5
        assert results.count(False) == 15
        assert store.get_event(event.id).current_participants == 5
