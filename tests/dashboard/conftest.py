"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import logging
import random
from datetime import date

import pytest

import shared.api_logging as api_logging
from shared.data.types import HistoryPoint
from shared.settings import DataMode, Settings


@pytest.fixture(autouse=True)
def _reset_logger_and_paths(tmp_path):
    """Reset the module-level logger and redirect log output to tmp_path."""
    old_logger = api_logging._logger
    old_dir = api_logging._LOG_DIR
    old_file = api_logging._LOG_FILE

    named_logger = logging.getLogger("env_dashboard.api")
    named_logger.handlers.clear()

    api_logging._logger = None
    api_logging._LOG_DIR = str(tmp_path)
    api_logging._LOG_FILE = str(tmp_path / "api_calls.log")

    yield tmp_path

    # Close file handlers to release file locks (important on Windows)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    api_logging._logger = old_logger
    api_logging._LOG_DIR = old_dir
    api_logging._LOG_FILE = old_file


# ── Sample data fixtures ─────────────────────────────────────────────────────


def _make_settings(**overrides) -> Settings:
    values = dict(
        waqi_token="YOUR_WAQI_TOKEN",
        openweather_api_key="YOUR_OPENWEATHER_API_KEY",
        openaq_api_key=None,
        city="valencia",
        country="ES",
        data_mode=DataMode.LIVE,
        request_timeout=5.0,
    )
    values.update(overrides)
    return Settings(**values)


def _make_point(day: str, pm25: float = 40, pm10: float = 60, no2: float = 30, o3: float | None = 70) -> HistoryPoint:
    return HistoryPoint(date=day, pm25=pm25, pm10=pm10, no2=no2, o3=o3)


@pytest.fixture
def make_settings():
    """Factory fixture for Settings with demo-mode defaults."""
    return _make_settings


@pytest.fixture
def make_point():
    """Factory fixture for HistoryPoint records."""
    return _make_point


@pytest.fixture
def sample_history() -> list[HistoryPoint]:
    """Ten consecutive days ending 2024-10-10."""
    return [
        _make_point(f"2024-10-{day:02d}", pm25=30 + day, pm10=50 + day, no2=20 + day)
        for day in range(1, 11)
    ]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def today() -> date:
    return date(2024, 10, 10)
