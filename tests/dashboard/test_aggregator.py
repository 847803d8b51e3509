"""Tests for shared/services/aggregator.py — concurrent loads and publishing."""

from __future__ import annotations

import asyncio
import random
from datetime import date

import pytest

from shared.constants import REFERENCE_STATIONS
from shared.data.base import EnvDataRepository
from shared.data.errors import EnvDataError
from shared.data.simulated_repo import SIMULATED_TRAFFIC, SIMULATED_WEATHER, SimulatedRepository
from shared.data.types import AirQualitySnapshot, HistoryPoint, PollutantReading
from shared.services.aggregator import EnvironmentAggregator, SnapshotKind
from shared.services.heatmap import station_points
from shared.services.history import TimeRange


def _air(pm25: float | None = 80) -> AirQualitySnapshot:
    pollutants = (PollutantReading("PM2.5", pm25, "µg/m³"),) if pm25 is not None else ()
    return AirQualitySnapshot(aqi=58, category="pm25", last_updated="2024-10-10 12:00:00", pollutants=pollutants)


class _StubRepo(EnvDataRepository):
    """Repository whose responses are set per test; exceptions are raised."""

    def __init__(self, air=None, weather=SIMULATED_WEATHER, traffic=SIMULATED_TRAFFIC, history=()):
        self.air = air if air is not None else _air()
        self.weather = weather
        self.traffic = traffic
        self.history = history
        self.history_calls: list[int] = []

    @staticmethod
    def _respond(value):
        if isinstance(value, Exception):
            raise value
        return value

    async def get_air_quality(self):
        return self._respond(self.air)

    async def get_weather(self):
        return self._respond(self.weather)

    async def get_traffic(self):
        return self._respond(self.traffic)

    async def get_pollution_history(self, days):
        self.history_calls.append(days)
        return list(self._respond(self.history))


class _GatedHistoryRepo(SimulatedRepository):
    """History calls wait on a per-``days`` gate so tests control completion order."""

    def __init__(self) -> None:
        super().__init__(rng=random.Random(0), today=date(2024, 10, 10))
        self.gates: dict[int, asyncio.Event] = {}

    async def get_pollution_history(self, days):
        gate = self.gates.setdefault(days, asyncio.Event())
        await gate.wait()
        return await super().get_pollution_history(days)


# ── Joint city load ──────────────────────────────────────────────────────────


class TestLoadCityData:
    @pytest.mark.asyncio
    async def test_populates_all_snapshots(self):
        aggregator = EnvironmentAggregator(_StubRepo())
        await aggregator.load_city_data()

        assert aggregator.air_quality == _air()
        assert aggregator.weather == SIMULATED_WEATHER
        assert aggregator.traffic == SIMULATED_TRAFFIC

    @pytest.mark.asyncio
    async def test_one_failure_does_not_block_others(self):
        repo = _StubRepo(weather=EnvDataError("weather down"))
        aggregator = EnvironmentAggregator(repo)

        await aggregator.load_city_data()

        assert aggregator.air_quality is not None
        assert aggregator.traffic is not None
        assert aggregator.weather is None

    @pytest.mark.asyncio
    async def test_all_failures_resolve(self):
        boom = RuntimeError("boom")
        aggregator = EnvironmentAggregator(_StubRepo(air=boom, weather=boom, traffic=boom))

        await aggregator.load_city_data()

        assert (aggregator.air_quality, aggregator.weather, aggregator.traffic) == (None, None, None)

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_value(self):
        repo = _StubRepo()
        aggregator = EnvironmentAggregator(repo)
        await aggregator.load_city_data()

        repo.weather = EnvDataError("weather down")
        await aggregator.load_city_data()

        assert aggregator.weather == SIMULATED_WEATHER

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, _reset_logger_and_paths):
        aggregator = EnvironmentAggregator(_StubRepo(weather=EnvDataError("weather down")))
        await aggregator.load_city_data()

        content = (_reset_logger_and_paths / "api_calls.log").read_text(encoding="utf-8")
        assert "Failed to load weather" in content
        assert "SERVICE OK: EnvironmentAggregator.load_city_data" in content


# ── Publish / subscribe ──────────────────────────────────────────────────────


class TestSubscribers:
    @pytest.mark.asyncio
    async def test_receives_each_successful_snapshot(self):
        received = []
        aggregator = EnvironmentAggregator(_StubRepo(traffic=EnvDataError("no traffic")))
        aggregator.subscribe(lambda kind, value: received.append(kind))

        await aggregator.load_city_data()

        assert sorted(received) == sorted([SnapshotKind.AIR_QUALITY, SnapshotKind.WEATHER])

    @pytest.mark.asyncio
    async def test_unsubscribe(self):
        received = []
        aggregator = EnvironmentAggregator(_StubRepo())
        unsubscribe = aggregator.subscribe(lambda kind, value: received.append(kind))
        unsubscribe()
        unsubscribe()

        await aggregator.load_city_data()

        assert received == []

    @pytest.mark.asyncio
    async def test_failing_subscriber_does_not_break_load(self):
        received = []

        def broken(kind, value):
            raise ValueError("subscriber bug")

        aggregator = EnvironmentAggregator(_StubRepo())
        aggregator.subscribe(broken)
        aggregator.subscribe(lambda kind, value: received.append(kind))

        await aggregator.load_city_data()

        assert len(received) == 3
        assert aggregator.weather is not None

    @pytest.mark.asyncio
    async def test_published_value_is_stored_value(self):
        received = {}
        aggregator = EnvironmentAggregator(_StubRepo(history=[HistoryPoint("2024-10-10", 1, 2, 3)]))
        aggregator.subscribe(lambda kind, value: received.__setitem__(kind, value))

        await aggregator.load_pollution_history(1)

        assert received[SnapshotKind.POLLUTION_HISTORY] is aggregator.pollution_history


# ── Pollution history ────────────────────────────────────────────────────────


class TestLoadPollutionHistory:
    @pytest.mark.asyncio
    async def test_stores_history(self):
        points = [HistoryPoint("2024-10-09", 1, 2, 3), HistoryPoint("2024-10-10", 4, 5, 6)]
        repo = _StubRepo(history=points)
        aggregator = EnvironmentAggregator(repo)

        assert await aggregator.load_pollution_history(30) is True
        assert aggregator.pollution_history == tuple(points)
        assert repo.history_calls == [30]

    @pytest.mark.asyncio
    async def test_defaults_to_seven_days(self):
        repo = _StubRepo(history=[])
        await EnvironmentAggregator(repo).load_pollution_history()
        assert repo.history_calls == [7]

    @pytest.mark.asyncio
    async def test_repository_failure_falls_back_to_simulation(self):
        aggregator = EnvironmentAggregator(_StubRepo(history=EnvDataError("history down")))

        assert await aggregator.load_pollution_history(5) is True
        assert len(aggregator.pollution_history) == 5

    @pytest.mark.asyncio
    async def test_superseded_result_is_discarded(self):
        repo = _GatedHistoryRepo()
        aggregator = EnvironmentAggregator(repo)

        slow = asyncio.create_task(aggregator.load_pollution_history(30))
        await asyncio.sleep(0)
        fast = asyncio.create_task(aggregator.load_pollution_history(7))
        await asyncio.sleep(0)

        repo.gates[7].set()
        assert await fast is True
        repo.gates[30].set()
        assert await slow is False

        assert len(aggregator.pollution_history) == 7

    @pytest.mark.asyncio
    async def test_sequential_loads_replace_history(self):
        aggregator = EnvironmentAggregator(SimulatedRepository(rng=random.Random(0)))
        await aggregator.load_pollution_history(30)
        await aggregator.load_pollution_history(7)
        assert len(aggregator.pollution_history) == 7


# ── Derived views ────────────────────────────────────────────────────────────


class TestDerivedViews:
    def test_empty_aggregator(self):
        aggregator = EnvironmentAggregator(_StubRepo())
        assert aggregator.air_quality is None
        assert aggregator.display_air_quality() is None
        assert aggregator.pollution_history == ()
        assert aggregator.history_series(TimeRange.LAST_7D).labels == ()

    @pytest.mark.asyncio
    async def test_display_air_quality_fills_max(self):
        aggregator = EnvironmentAggregator(_StubRepo())
        await aggregator.load_city_data()

        display = aggregator.display_air_quality()
        assert all(p.max is not None for p in display.pollutants)
        assert aggregator.air_quality.pollutants[0].max is None

    @pytest.mark.asyncio
    async def test_current_pm25_from_snapshot(self):
        aggregator = EnvironmentAggregator(_StubRepo(air=_air(80)))
        await aggregator.load_city_data()
        assert aggregator.current_pm25() == 80

    @pytest.mark.asyncio
    async def test_current_pm25_default(self):
        aggregator = EnvironmentAggregator(_StubRepo(air=_air(None)))
        await aggregator.load_city_data()
        assert aggregator.current_pm25() == 45

    @pytest.mark.asyncio
    async def test_heatmap_uses_current_pm25(self):
        aggregator = EnvironmentAggregator(_StubRepo(air=_air(80)))
        await aggregator.load_city_data()

        points = aggregator.heatmap_points(rng=random.Random(5))
        assert points[: len(REFERENCE_STATIONS)] == station_points(80)

    @pytest.mark.asyncio
    async def test_history_series(self, sample_history):
        aggregator = EnvironmentAggregator(_StubRepo(history=sample_history))
        await aggregator.load_pollution_history(30)

        assert len(aggregator.history_series(TimeRange.LAST_7D).labels) == 7
        assert len(aggregator.history_series(TimeRange.LAST_24H).labels) == 6
