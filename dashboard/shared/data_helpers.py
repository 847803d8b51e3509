"""Data processing helpers for the pollution history pipeline."""

from __future__ import annotations

import math
import random
import statistics
from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone

from envfeeds.models.openaq import Measurement

from .constants import HISTORY_BASELINE, HISTORY_PARAMETERS
from .data.types import HistoryPoint


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _utc_date(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).date().isoformat()


def aggregate_daily_averages(measurements: Iterable[Measurement]) -> list[HistoryPoint]:
    """Group raw measurements by UTC date and average each parameter.

    Parameters without samples on a date average to 0 rather than being
    omitted. Measurements without a timestamp are skipped. The result is
    sorted ascending by date string.
    """
    by_date: dict[str, dict[str, list[float]]] = {}
    for m in measurements:
        if m.date is None or m.date.utc is None:
            continue
        day = by_date.setdefault(
            _utc_date(m.date.utc), {p: [] for p in HISTORY_PARAMETERS},
        )
        if m.parameter in day and m.value is not None:
            day[m.parameter].append(m.value)

    history = [
        HistoryPoint(
            date=day,
            pm25=statistics.fmean(values["pm25"]) if values["pm25"] else 0,
            pm10=statistics.fmean(values["pm10"]) if values["pm10"] else 0,
            no2=statistics.fmean(values["no2"]) if values["no2"] else 0,
            o3=statistics.fmean(values["o3"]) if values["o3"] else 0,
        )
        for day, values in by_date.items()
    ]
    history.sort(key=lambda p: p.date)
    return history


def simulate_history(
    days: int,
    rng: random.Random | None = None,
    today: date | None = None,
) -> list[HistoryPoint]:
    """Generate one point per day ending today, each within ±20% of the baseline."""
    rng = rng or random.Random()
    today = today or utc_today()
    days = max(days, 1)

    def vary(key: str) -> int:
        return round_half_up(HISTORY_BASELINE[key] * rng.uniform(0.8, 1.2))

    history: list[HistoryPoint] = []
    for offset in range(days - 1, -1, -1):
        history.append(HistoryPoint(
            date=(today - timedelta(days=offset)).isoformat(),
            pm25=vary("pm25"),
            pm10=vary("pm10"),
            no2=vary("no2"),
            o3=vary("o3"),
        ))
    return history
