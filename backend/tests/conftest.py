"""
conftest.py for backend/tests/

Shared fixtures:
    store        a freshly seeded EventStore (full sample data, ids 1..5)
    client       FastAPI TestClient with the lifespan running, so every test
                 gets its own freshly seeded store
    make_event   builds EventResponse / LocatedEvent objects for client-side tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add backend/ to sys.path so `api`, `store`, ... import without an install.
_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

from api.main import app  # noqa: E402
from core.config import settings  # noqa: E402
from schemas.event import EventResponse, LocatedEvent  # noqa: E402
from store import EventStore  # noqa: E402


@pytest.fixture
def store() -> EventStore:
    return EventStore.seeded("full")


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch):
    # Pin the knobs a developer's .env could change.
    monkeypatch.setattr(settings, "seed_data", "full")
    monkeypatch.setattr(settings, "log_file", None)
    monkeypatch.setattr(settings, "log_level", "WARNING")
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_event():
    """Factory: make_event(id, latitude=..., longitude=..., distance=...)."""

    def _make(event_id: int = 1, *, distance=None, **overrides):
        fields = {
            "id": event_id,
            "title": f"Event {event_id}",
            "description": "",
            "location": "Somewhere",
            "date": "2025-11-20T18:30:00",
            "max_participants": 10,
            "current_participants": 0,
        }
        fields.update(overrides)
        if distance is not None:
            return LocatedEvent(**fields, distance=distance)
        return EventResponse(**fields)

    return _make
