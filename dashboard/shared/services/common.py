"""Shared pure functions for the service layer (no Streamlit dependency)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from ..constants import AIR_QUALITY_BANDS, DEFAULT_DISPLAY_MAX, POLLUTANT_DISPLAY_MAX
from ..data.types import AirQualitySnapshot, PollutantReading


@dataclass(frozen=True)
class AirQualityLevel:
    label: str
    color: str


def normalize_intensity(pm25: float) -> float:
    """Map a PM2.5 concentration onto [0, 1] along the AQI bands.

    Each band is linear between its lower and upper breakpoint, so
    ``normalize_intensity(12) == 0.2`` and everything above 500 is 1.0.
    """
    lower, lower_intensity = 0.0, 0.0
    for band in AIR_QUALITY_BANDS:
        if pm25 <= band.upper:
            span = (pm25 - lower) / (band.upper - lower)
            return max(lower_intensity + span * (band.intensity - lower_intensity), 0.0)
        lower, lower_intensity = band.upper, band.intensity
    return 1.0


def classify_air_quality(pm25: float) -> AirQualityLevel:
    """Return the label and colour of the band containing *pm25*."""
    for band in AIR_QUALITY_BANDS[:-1]:
        if pm25 <= band.upper:
            return AirQualityLevel(band.label, band.color)
    last = AIR_QUALITY_BANDS[-1]
    return AirQualityLevel(last.label, last.color)


def clamp_percentage(value: float) -> float:
    """Clamp a display percentage (e.g. congestion) to [0, 100]."""
    return min(max(value, 0), 100)


def with_display_max(pollutants: Iterable[PollutantReading]) -> tuple[PollutantReading, ...]:
    """Return copies of *pollutants* with the gauge maximum filled in."""
    return tuple(
        replace(p, max=POLLUTANT_DISPLAY_MAX.get(p.name, DEFAULT_DISPLAY_MAX))
        for p in pollutants
    )


def pollutant_percentage(reading: PollutantReading) -> float:
    """Gauge fill for a reading: value / max as a clamped percentage."""
    maximum = reading.max if reading.max is not None else DEFAULT_DISPLAY_MAX
    if maximum == 0:
        return 0
    return clamp_percentage(reading.value / maximum * 100)


def find_pollutant(snapshot: AirQualitySnapshot | None, name: str) -> PollutantReading | None:
    """Return the first reading called *name*, or None."""
    if snapshot is None:
        return None
    return next((p for p in snapshot.pollutants if p.name == name), None)
