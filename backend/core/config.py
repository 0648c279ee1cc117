"""core/config.py — Application configuration via Pydantic BaseSettings.

Loads environment variables from .env (and the OS environment).
Import `settings` from this module wherever configuration is needed.

Usage:
    from core.config import settings
    from store import EventStore

    if settings.is_production:
        ...
    store = EventStore.seeded(settings.seed_data)
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env lives in the project root (one level above backend/)
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

SERVICE_NAME = "Event Discovery API"
VERSION = "1.0.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    environment: str = "development"
    log_level: str = "DEBUG"
    log_file: str | None = None   # e.g. logs/app.log; console only when unset

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Which sample events the store is seeded with at startup
    seed_data: Literal["full", "minimal", "none"] = "full"

    # CORS: any origin may call the API
    allowed_origins: list[str] = ["*"]

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("seed_data", mode="before")
    @classmethod
    def _lowercase_seed_data(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


# Singleton: import this everywhere
settings = Settings()
