"""Environment-driven settings for the dashboard data layer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from dotenv import load_dotenv

_WAQI_TOKEN_ENV = "WAQI_TOKEN"
_OPENWEATHER_KEY_ENV = "OPENWEATHER_API_KEY"
_OPENAQ_KEY_ENV = "OPENAQ_API_KEY"
_CITY_ENV = "ENV_DASHBOARD_CITY"
_COUNTRY_ENV = "ENV_DASHBOARD_COUNTRY"
_DATA_MODE_ENV = "ENV_DASHBOARD_DATA_MODE"
_TIMEOUT_ENV = "ENV_DASHBOARD_TIMEOUT"

WAQI_TOKEN_PLACEHOLDER = "YOUR_WAQI_TOKEN"
OPENWEATHER_KEY_PLACEHOLDER = "YOUR_OPENWEATHER_API_KEY"

_DEFAULT_TIMEOUT = 10.0


class DataMode(str, Enum):
    """Which repository backs the dashboard."""

    LIVE = "live"
    SIMULATED = "simulated"


@dataclass(frozen=True)
class Settings:
    waqi_token: str
    openweather_api_key: str
    openaq_api_key: str | None
    city: str
    country: str
    data_mode: DataMode
    request_timeout: float

    @property
    def has_waqi_token(self) -> bool:
        return _is_configured(self.waqi_token, WAQI_TOKEN_PLACEHOLDER)

    @property
    def has_openweather_key(self) -> bool:
        return _is_configured(self.openweather_api_key, OPENWEATHER_KEY_PLACEHOLDER)

    @property
    def weather_query(self) -> str:
        return f"{self.city.title()},{self.country}"


def _is_configured(value: str, placeholder: str) -> bool:
    return bool(value) and value != placeholder


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    return value.strip() or None


def _read_timeout(default: float) -> float:
    value = os.getenv(_TIMEOUT_ENV)
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_data_mode(default: DataMode) -> DataMode:
    value = _read_str_env(_DATA_MODE_ENV, default.value).lower()
    try:
        return DataMode(value)
    except ValueError:
        return default


def load_settings() -> Settings:
    """Build settings from the current environment (and ``.env`` if present)."""
    load_dotenv()
    return Settings(
        waqi_token=_read_str_env(_WAQI_TOKEN_ENV, WAQI_TOKEN_PLACEHOLDER),
        openweather_api_key=_read_str_env(_OPENWEATHER_KEY_ENV, OPENWEATHER_KEY_PLACEHOLDER),
        openaq_api_key=_read_optional_env(_OPENAQ_KEY_ENV),
        city=_read_str_env(_CITY_ENV, "valencia"),
        country=_read_str_env(_COUNTRY_ENV, "ES"),
        data_mode=_read_data_mode(DataMode.LIVE),
        request_timeout=_read_timeout(_DEFAULT_TIMEOUT),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
