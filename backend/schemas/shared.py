"""schemas/shared.py — Reusable building blocks shared across schema modules."""

from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    message: str
    status_code: int
    request_id: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str
    version: str


class StoreHealthResponse(BaseModel):
    status: str
    events: int
