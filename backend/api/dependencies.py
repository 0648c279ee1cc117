"""
dependencies.py — FastAPI dependency injection

Provides get_store() for use with Depends() in route handlers. The store is
built once in the application lifespan (api/main.py) and parked on
app.state; handlers never reach for a module-level global.

Usage in a route handler:
    from fastapi import Depends
    from api.dependencies import get_store
    from store import EventStore

    @router.get("/example")
    def example(store: EventStore = Depends(get_store)):
        return len(store)

Tests can swap the store with app.dependency_overrides[get_store].
"""

from fastapi import HTTPException, Request

from store import EventStore


def get_store(request: Request) -> EventStore:
    """Return the process-wide EventStore attached during startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Event store is not initialised")
    return store
