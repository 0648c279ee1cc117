"""client/config.py — Client-side configuration via Pydantic BaseSettings.

Read from the environment (and .env in the project root), independent of the
server's core.config so the client can run on a different machine.

    API_URL             base URL of the Event Discovery API
    API_TIMEOUT         seconds per HTTP request
    LOCATION_PROVIDER   ip | fixed | none
    LOCATION_TIMEOUT    seconds to wait for a position fix
    LOCATION_MAX_AGE    seconds a cached fix stays valid
    LOCATION_LATITUDE / LOCATION_LONGITUDE   coordinates for the fixed provider
    LOCATION_LOOKUP_URL IP geolocation endpoint for the ip provider
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

DEFAULT_API_URL = "http://localhost:5000"


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: str = DEFAULT_API_URL
    api_timeout: float = 10.0

    location_provider: Literal["ip", "fixed", "none"] = "ip"
    location_timeout: float = 5.0
    location_max_age: float = 300.0
    location_latitude: Optional[float] = None
    location_longitude: Optional[float] = None
    location_lookup_url: str = "http://ip-api.com/json/"
