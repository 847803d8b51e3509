"""Data layer — source-agnostic repository factory and re-exports."""

from __future__ import annotations

from ..settings import DataMode, Settings, get_settings
from .base import EnvDataRepository
from .errors import EnvDataError
from .types import (
    AirQualitySnapshot,
    HeatmapPoint,
    HistoryPoint,
    PollutantReading,
    TrafficSnapshot,
    TrafficStreet,
    WeatherSnapshot,
)


def get_repository(settings: Settings | None = None) -> EnvDataRepository:
    """Return the repository matching the configured data mode."""
    settings = settings or get_settings()
    if settings.data_mode == DataMode.SIMULATED:
        from .simulated_repo import SimulatedRepository

        return SimulatedRepository()
    from .live_repo import LiveRepository

    return LiveRepository(settings)


__all__ = [
    "AirQualitySnapshot",
    "EnvDataError",
    "EnvDataRepository",
    "HeatmapPoint",
    "HistoryPoint",
    "PollutantReading",
    "TrafficSnapshot",
    "TrafficStreet",
    "WeatherSnapshot",
    "get_repository",
]
