"""
main.py — Event Discovery API entry point

The FastAPI application instance lives here. All middleware, routers,
exception handlers and startup/shutdown hooks are registered in this file.

Usage
-----
Development (auto-reloads on file save):
    cd backend
    uvicorn api.main:app --reload --port 5000

Production (single worker: the event store lives in process memory):
    cd backend
    gunicorn api.main:app -c gunicorn.conf.py

Docs (once running):
    http://localhost:5000/docs    — Swagger UI (interactive)
    http://localhost:5000/redoc   — ReDoc (read-only)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routers.events import router as events_router
from api.routers.health import router as health_router
from core.config import SERVICE_NAME, VERSION, settings
from core.logging import configure_logging
from core.middleware import RequestIDMiddleware, TimingMiddleware
from store import EventStore, EventStoreError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan: startup and shutdown hooks
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── Startup ────────────────────────────────────────────────────────────────
    configure_logging(settings.log_level, settings.log_file)
    app.state.store = EventStore.seeded(settings.seed_data)
    logger.info(
        "Event Discovery API starting",
        extra={
            "environment": settings.environment,
            "version": VERSION,
            "log_level": settings.log_level,
            "allowed_origins": settings.allowed_origins,
            "seed_data": settings.seed_data,
        },
    )
    yield
    # ── Shutdown ───────────────────────────────────────────────────────────────
    # The store is not persisted; its contents go away with the process.
    logger.info("Event Discovery API shutting down", extra={"events": app.state.store.count()})
    app.state.store = None


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title=SERVICE_NAME,
    description=(
        "Event discovery: list, filter and search events, create new ones, "
        "and register for a seat."
    ),
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# ---------------------------------------------------------------------------
# Middleware  (add_middleware order matters: last added = outermost = first to
# handle incoming requests)
#
#   Execution order for a request:
#     CORS → RequestID → Timing → route handler
# ---------------------------------------------------------------------------

app.add_middleware(TimingMiddleware)
app.add_middleware(RequestIDMiddleware)

# CORS: outermost so browser preflight OPTIONS requests are handled immediately
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Exception handlers: every error body is {"message", "status_code", "request_id"}
# ---------------------------------------------------------------------------

def _error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "message": message,
            "status_code": status_code,
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@app.exception_handler(EventStoreError)
async def event_store_error_handler(request: Request, exc: EventStoreError) -> JSONResponse:
    """Domain errors: validation (400), not found (404), event full (400)."""
    logger.warning(
        "request rejected",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "method": request.method,
            "path": request.url.path,
            "error": type(exc).__name__,
            "detail": exc.message,
        },
    )
    return _error_response(request, exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors (400), not FastAPI's default 422."""
    errors = exc.errors()
    if any(err.get("type") == "missing" for err in errors):
        message = "Missing required fields"
    else:
        parts = []
        for err in errors:
            loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
            parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
        message = "Invalid request: " + "; ".join(parts)
    return _error_response(request, 400, message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Return structured JSON for all remaining HTTP errors (404 routes, 405, 503...)."""
    return _error_response(request, exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log the traceback, return clean JSON."""
    logger.error(
        "unhandled exception",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "method": request.method,
            "path": request.url.path,
            "error": str(exc),
        },
        exc_info=True,
    )
    return _error_response(request, 500, "Internal server error")


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(health_router)                                      # /health, /health/store
app.include_router(events_router, prefix="/api/events", tags=["events"])


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

@app.get("/", tags=["root"], summary="API root")
def root():
    """Confirms the API is running. Returns service name, version, and docs URL."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "docs":    "/docs",
    }
