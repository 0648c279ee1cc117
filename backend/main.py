"""
main.py — Convenience entry point for the Event Discovery backend.

The FastAPI application is defined in api/main.py.
This file re-exports `app` so uvicorn can be invoked from backend/ as:

    uvicorn main:app --reload --port 5000

The canonical import path (api.main:app) is used by gunicorn.conf.py.
"""

from api.main import app  # noqa: F401  (re-export)
