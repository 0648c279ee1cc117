"""api/routers/health.py — Health check endpoints.

Routes (mounted at root, no /api prefix):
    GET /health         Liveness check — returns status, env, version, timestamp
    GET /health/store   Readiness check — verifies the event store is attached
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from core.config import VERSION, settings
from schemas.shared import HealthResponse, StoreHealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
def health():
    """Returns environment, version, and current UTC timestamp."""
    return HealthResponse(
        status="ok",
        environment=settings.environment,
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/health/store", response_model=StoreHealthResponse, summary="Readiness check")
def health_store(request: Request):
    """Reports how many events the store holds.

    Returns HTTP 200 when the store is attached, HTTP 503 before startup has
    finished (or after shutdown). Reads app.state directly rather than going
    through the get_store dependency so the 503 body keeps this route's shape.
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        logger.warning("health/store: event store not attached")
        return JSONResponse(
            status_code=503,
            content={"status": "error", "events": 0},
        )
    count = store.count()
    logger.debug("health/store: store reachable", extra={"events": count})
    return StoreHealthResponse(status="ok", events=count)
