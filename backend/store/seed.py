"""store/seed.py — Fixed sample events loaded into the store at every start.

Variants (selected by settings.seed_data):
    full     ids 1..5
    minimal  ids 1..3
    none     empty store
"""

from __future__ import annotations

from dataclasses import replace

from store.models import Event

SEED_VARIANTS = ("full", "minimal", "none")


def _full() -> list[Event]:
    return [
        Event(
            id=1,
            title="React Conference 2025",
            description="Annual conference for React developers.",
            location="Miami",
            latitude=25.7617,
            longitude=-80.1918,
            date="2025-12-10T09:00:00",
            max_participants=100,
            current_participants=45,
        ),
        Event(
            id=2,
            title="Node.js Meetup",
            description="Monthly meetup for the Node.js community.",
            location="Online",
            date="2025-11-20T18:30:00",
            max_participants=50,
            current_participants=30,
        ),
        Event(
            id=3,
            title="Local Art Fair",
            description="Discover local artists and creators.",
            location="Miami",
            latitude=25.7743,
            longitude=-80.1937,
            date="2025-11-15T11:00:00",
            max_participants=200,
            current_participants=112,
        ),
        Event(
            id=4,
            title="Tech Startup Pitch Night",
            description="Watch innovative startups pitch their ideas.",
            location="San Francisco",
            latitude=37.7749,
            longitude=-122.4194,
            date="2025-11-25T19:00:00",
            max_participants=150,
            current_participants=89,
        ),
        Event(
            id=5,
            title="Marathon Training Group",
            description="Weekly long run with experienced marathoners.",
            location="New York",
            latitude=40.7128,
            longitude=-74.0060,
            date="2025-11-18T07:00:00",
            max_participants=30,
            current_participants=22,
        ),
    ]


def seed_events(variant: str = "full") -> list[Event]:
    """Return a fresh list of sample events for the given variant."""
    if variant == "full":
        return _full()
    if variant == "minimal":
        # The minimal set carries no coordinates.
        return [replace(e, latitude=None, longitude=None) for e in _full()[:3]]
    if variant == "none":
        return []
    raise ValueError(f"Unknown seed variant {variant!r}; expected one of {SEED_VARIANTS}")
