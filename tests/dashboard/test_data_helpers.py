"""Tests for shared/data_helpers.py — daily aggregation and history simulation."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from envfeeds.models.openaq import Measurement
from shared.constants import HISTORY_BASELINE
from shared.data_helpers import (
    aggregate_daily_averages,
    round_half_up,
    simulate_history,
)
from tests.conftest import SAMPLE_MEASUREMENTS


def _measurement(parameter: str, value: float, utc: str | None) -> Measurement:
    return Measurement.model_validate({
        "parameter": parameter,
        "value": value,
        "date": {"utc": utc} if utc is not None else None,
    })


# ── round_half_up ────────────────────────────────────────────────────────────


class TestRoundHalfUp:
    @pytest.mark.parametrize("value, expected", [(2.5, 3), (3.5, 4), (2.4, 2), (-0.5, 0), (44.99, 45)])
    def test_rounds(self, value, expected):
        assert round_half_up(value) == expected


# ── aggregate_daily_averages ─────────────────────────────────────────────────


class TestAggregateDailyAverages:
    def test_averages_per_day_and_parameter(self):
        measurements = [
            _measurement("pm25", 10, "2024-10-04T10:00:00Z"),
            _measurement("pm25", 20, "2024-10-04T22:00:00Z"),
            _measurement("pm10", 5, "2024-10-05T08:00:00Z"),
        ]
        day1, day2 = aggregate_daily_averages(measurements)

        assert (day1.date, day1.pm25, day1.pm10, day1.no2) == ("2024-10-04", 15, 0, 0)
        assert (day2.date, day2.pm25, day2.pm10, day2.no2) == ("2024-10-05", 0, 5, 0)

    def test_sample_payload(self):
        measurements = [Measurement.model_validate(r) for r in SAMPLE_MEASUREMENTS["results"]]
        history = aggregate_daily_averages(measurements)

        assert [p.date for p in history] == ["2024-10-03", "2024-10-04", "2024-10-05"]
        assert history[0].o3 == 40
        assert history[0].pm25 == 0
        assert history[1].pm25 == 15

    def test_sorted_ascending(self):
        measurements = [
            _measurement("no2", 1, "2024-10-09T00:00:00Z"),
            _measurement("no2", 2, "2024-10-01T00:00:00Z"),
            _measurement("no2", 3, "2024-10-05T00:00:00Z"),
        ]
        dates = [p.date for p in aggregate_daily_averages(measurements)]
        assert dates == sorted(dates)

    def test_groups_by_utc_date(self):
        # 23:30 at -02:00 is already the next day in UTC
        history = aggregate_daily_averages([_measurement("pm25", 7, "2024-10-04T23:30:00-02:00")])
        assert history[0].date == "2024-10-05"

    def test_naive_timestamp_treated_as_utc(self):
        history = aggregate_daily_averages([_measurement("pm25", 7, "2024-10-04T23:30:00")])
        assert history[0].date == "2024-10-04"

    def test_unknown_parameter_still_creates_day(self):
        history = aggregate_daily_averages([_measurement("so2", 9, "2024-10-04T10:00:00Z")])
        assert len(history) == 1
        assert (history[0].pm25, history[0].pm10, history[0].no2, history[0].o3) == (0, 0, 0, 0)

    def test_skips_undated(self):
        assert aggregate_daily_averages([_measurement("pm25", 9, None)]) == []

    def test_empty(self):
        assert aggregate_daily_averages([]) == []


# ── simulate_history ─────────────────────────────────────────────────────────


class TestSimulateHistory:
    def test_one_point_per_day_ending_today(self, rng, today):
        history = simulate_history(5, rng=rng, today=today)

        assert len(history) == 5
        assert history[-1].date == today.isoformat()
        expected = [(today - timedelta(days=n)).isoformat() for n in range(4, -1, -1)]
        assert [p.date for p in history] == expected

    def test_dates_strictly_increasing(self, rng, today):
        dates = [p.date for p in simulate_history(30, rng=rng, today=today)]
        assert all(a < b for a, b in zip(dates, dates[1:]))

    def test_values_within_twenty_percent_of_baseline(self, rng, today):
        for point in simulate_history(60, rng=rng, today=today):
            for key in ("pm25", "pm10", "no2", "o3"):
                base = HISTORY_BASELINE[key]
                value = getattr(point, key)
                assert round_half_up(base * 0.8) <= value <= round_half_up(base * 1.2)
                assert value == int(value)

    def test_seeded_rng_is_reproducible(self, today):
        import random

        first = simulate_history(7, rng=random.Random(7), today=today)
        second = simulate_history(7, rng=random.Random(7), today=today)
        assert first == second

    @pytest.mark.parametrize("days", [0, -3])
    def test_non_positive_days_yield_today_only(self, rng, today, days):
        history = simulate_history(days, rng=rng, today=today)
        assert [p.date for p in history] == [today.isoformat()]

    def test_defaults_to_utc_today(self, rng):
        history = simulate_history(1, rng=rng)
        assert history[0].date in {
            datetime.now(timezone.utc).date().isoformat(),
            date.today().isoformat(),
        }
