"""Pollution history projections for the bar chart."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..constants import HOURLY_FACTORS
from ..data.types import HistoryPoint
from ..data_helpers import round_half_up
from ..formatters import format_day_month, format_hour_label


class TimeRange(str, Enum):
    """Chart ranges offered by the dashboard."""

    LAST_24H = "24h"
    LAST_7D = "7d"
    LAST_30D = "30d"

    @property
    def days(self) -> int:
        return {"24h": 1, "7d": 7, "30d": 30}[self.value]


@dataclass(frozen=True)
class ChartSeries:
    labels: tuple[str, ...]
    pm25: tuple[float, ...]
    pm10: tuple[float, ...]
    no2: tuple[float, ...]
    combined: tuple[float, ...]  # mean of pm25/pm10/no2 per label


def _series(
    labels: list[str], pm25: list[float], pm10: list[float], no2: list[float],
) -> ChartSeries:
    combined = [(a + b + c) / 3 for a, b, c in zip(pm25, pm10, no2)]
    return ChartSeries(
        labels=tuple(labels),
        pm25=tuple(pm25),
        pm10=tuple(pm10),
        no2=tuple(no2),
        combined=tuple(combined),
    )


def hourly_jitter(hour: int) -> float:
    """Deterministic per-hour factor in [0.90, 1.09]."""
    return 0.9 + ((hour * 7) % 20) / 100


def hourly_projection(history: Sequence[HistoryPoint]) -> ChartSeries:
    """Spread the latest daily average over six 4-hour marks.

    This is a synthetic diurnal curve, not measured hourly data.
    """
    if not history:
        return _series([], [], [], [])
    base = history[-1]
    labels: list[str] = []
    pm25: list[float] = []
    pm10: list[float] = []
    no2: list[float] = []
    for hour, factor in HOURLY_FACTORS.items():
        scale = factor * hourly_jitter(hour)
        labels.append(format_hour_label(hour))
        pm25.append(round_half_up(base.pm25 * scale))
        pm10.append(round_half_up(base.pm10 * scale))
        no2.append(round_half_up(base.no2 * scale))
    return _series(labels, pm25, pm10, no2)


def daily_projection(history: Sequence[HistoryPoint], days: int) -> ChartSeries:
    """Return the trailing *days* points labelled by day and month."""
    recent = list(history)[-days:] if days > 0 else []
    return _series(
        [format_day_month(p.date) for p in recent],
        [p.pm25 for p in recent],
        [p.pm10 for p in recent],
        [p.no2 for p in recent],
    )


def project_history(history: Sequence[HistoryPoint], time_range: TimeRange) -> ChartSeries:
    """Pick the projection that matches *time_range*."""
    if time_range == TimeRange.LAST_24H:
        return hourly_projection(history)
    return daily_projection(history, time_range.days)
