"""Simulated data repository used when live credentials are absent."""

from __future__ import annotations

import random
from datetime import date, datetime

from ..api_logging import log_api_call
from ..constants import MICROGRAMS_PER_M3
from ..data_helpers import simulate_history
from .base import EnvDataRepository
from .types import (
    AirQualitySnapshot,
    HistoryPoint,
    PollutantReading,
    TrafficSnapshot,
    TrafficStreet,
    WeatherSnapshot,
)

SIMULATED_POLLUTANTS: tuple[PollutantReading, ...] = (
    PollutantReading("PM2.5", 45, MICROGRAMS_PER_M3),
    PollutantReading("PM10", 62, MICROGRAMS_PER_M3),
    PollutantReading("NO₂", 38, MICROGRAMS_PER_M3),
    PollutantReading("O3", 72, MICROGRAMS_PER_M3),
)

SIMULATED_WEATHER = WeatherSnapshot(
    temperature=16,
    rain=2.4,
    rain_probability=45,
    humidity=68,
    rain_24h=8.7,
)

SIMULATED_TRAFFIC = TrafficSnapshot(
    overall_congestion=73,
    category="High congestion",
    streets=(
        TrafficStreet("Avenida del Cid", 85),
        TrafficStreet("Gran Vía", 68),
        TrafficStreet("Blasco Ibáñez", 52),
    ),
)


def now_timestamp() -> str:
    """Current local time as an ISO-8601 string with seconds precision."""
    return datetime.now().astimezone().isoformat(timespec="seconds")


def simulated_air_quality() -> AirQualitySnapshot:
    return AirQualitySnapshot(
        aqi=67,
        category="Moderate",
        last_updated=now_timestamp(),
        pollutants=SIMULATED_POLLUTANTS,
    )


class SimulatedRepository(EnvDataRepository):
    """Fixed snapshots and randomized history; never touches the network."""

    def __init__(self, rng: random.Random | None = None, today: date | None = None) -> None:
        self._rng = rng or random.Random()
        self._today = today

    @log_api_call
    async def get_air_quality(self) -> AirQualitySnapshot:
        return simulated_air_quality()

    @log_api_call
    async def get_weather(self) -> WeatherSnapshot:
        return SIMULATED_WEATHER

    @log_api_call
    async def get_traffic(self) -> TrafficSnapshot:
        return SIMULATED_TRAFFIC

    @log_api_call
    async def get_pollution_history(self, days: int) -> list[HistoryPoint]:
        return simulate_history(days, rng=self._rng, today=self._today)
