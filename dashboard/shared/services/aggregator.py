"""Environmental data aggregator — owns the latest snapshots and publishes them."""

from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import replace
from enum import Enum
from typing import Any

from ..api_logging import get_logger, log_service_call
from ..constants import DEFAULT_PM25
from ..data.base import EnvDataRepository
from ..data.types import (
    AirQualitySnapshot,
    HeatmapPoint,
    HistoryPoint,
    TrafficSnapshot,
    WeatherSnapshot,
)
from ..data_helpers import simulate_history
from .common import find_pollutant, with_display_max
from .heatmap import build_heatmap
from .history import ChartSeries, TimeRange, project_history


class SnapshotKind(str, Enum):
    AIR_QUALITY = "air_quality"
    WEATHER = "weather"
    TRAFFIC = "traffic"
    POLLUTION_HISTORY = "pollution_history"


Subscriber = Callable[[SnapshotKind, Any], None]


class EnvironmentAggregator:
    """Holds one latest-value cell per feed and notifies subscribers on replace.

    Snapshots are frozen records replaced wholesale, so readers never see a
    partially updated value. Failures never propagate to callers: air quality,
    weather and traffic keep their previous value, history falls back to
    simulated data.
    """

    def __init__(self, repo: EnvDataRepository) -> None:
        self._repo = repo
        self._air_quality: AirQualitySnapshot | None = None
        self._weather: WeatherSnapshot | None = None
        self._traffic: TrafficSnapshot | None = None
        self._history: tuple[HistoryPoint, ...] = ()
        self._history_generation = 0
        self._subscribers: list[Subscriber] = []

    # ── Read-only accessors ──────────────────────────────────────────────

    @property
    def air_quality(self) -> AirQualitySnapshot | None:
        return self._air_quality

    @property
    def weather(self) -> WeatherSnapshot | None:
        return self._weather

    @property
    def traffic(self) -> TrafficSnapshot | None:
        return self._traffic

    @property
    def pollution_history(self) -> tuple[HistoryPoint, ...]:
        return self._history

    # ── Publish / subscribe ──────────────────────────────────────────────

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback*; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, kind: SnapshotKind, value: Any) -> None:
        for callback in list(self._subscribers):
            try:
                callback(kind, value)
            except Exception:
                get_logger().exception("Subscriber %r failed on %s", callback, kind.value)

    # ── Loads ────────────────────────────────────────────────────────────

    async def _guarded(
        self,
        kind: SnapshotKind,
        fetch: Callable[[], Awaitable[Any]],
        store: Callable[[Any], None],
    ) -> None:
        try:
            value = await fetch()
        except Exception as exc:
            get_logger().error("Failed to load %s, keeping previous value: %s", kind.value, exc)
            return
        store(value)
        self._publish(kind, value)

    def _store_air_quality(self, value: AirQualitySnapshot) -> None:
        self._air_quality = value

    def _store_weather(self, value: WeatherSnapshot) -> None:
        self._weather = value

    def _store_traffic(self, value: TrafficSnapshot) -> None:
        self._traffic = value

    @log_service_call
    async def load_city_data(self) -> None:
        """Fetch air quality, weather and traffic concurrently.

        Settles once every fetch has succeeded or failed; one failure never
        cancels or blocks the others.
        """
        await asyncio.gather(
            self._guarded(SnapshotKind.AIR_QUALITY, self._repo.get_air_quality, self._store_air_quality),
            self._guarded(SnapshotKind.WEATHER, self._repo.get_weather, self._store_weather),
            self._guarded(SnapshotKind.TRAFFIC, self._repo.get_traffic, self._store_traffic),
        )

    @log_service_call
    async def load_pollution_history(self, days: int = 7) -> bool:
        """Fetch and publish *days* of history.

        Returns False when a newer call started while this one was in flight;
        the stale result is then discarded instead of overwriting the newer one.
        """
        self._history_generation += 1
        generation = self._history_generation
        try:
            history = await self._repo.get_pollution_history(days)
        except Exception as exc:
            get_logger().error("History load failed, simulating %d days: %s", days, exc)
            history = simulate_history(days)
        if generation != self._history_generation:
            get_logger().info("Discarding superseded %d-day history", days)
            return False
        self._history = tuple(history)
        self._publish(SnapshotKind.POLLUTION_HISTORY, self._history)
        return True

    # ── Derived views ────────────────────────────────────────────────────

    def display_air_quality(self) -> AirQualitySnapshot | None:
        """Current air quality with gauge maxima filled in."""
        if self._air_quality is None:
            return None
        return replace(self._air_quality, pollutants=with_display_max(self._air_quality.pollutants))

    def current_pm25(self) -> float:
        reading = find_pollutant(self._air_quality, "PM2.5")
        return reading.value if reading is not None else DEFAULT_PM25

    def heatmap_points(self, rng: random.Random | None = None) -> list[HeatmapPoint]:
        return build_heatmap(self.current_pm25(), rng=rng)

    def history_series(self, time_range: TimeRange) -> ChartSeries:
        return project_history(self._history, time_range)
