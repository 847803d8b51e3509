"""Data contracts for the environmental dashboard data layer.

Every record is a frozen dataclass: snapshots are replaced wholesale, never
mutated, and ``dataclasses.asdict`` turns any of them into plain JSON-ready
dicts for the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PollutantReading:
    name: str
    value: float
    unit: str
    max: float | None = None  # gauge maximum, filled in at display time


@dataclass(frozen=True)
class AirQualitySnapshot:
    aqi: int
    category: str
    last_updated: str
    pollutants: tuple[PollutantReading, ...]


@dataclass(frozen=True)
class WeatherSnapshot:
    temperature: float = 0.0  # °C
    rain: float = 0.0  # mm, last hour
    rain_probability: float = 0.0  # %
    humidity: float = 0.0  # %
    rain_24h: float = 0.0  # mm


@dataclass(frozen=True)
class TrafficStreet:
    name: str
    congestion: float  # 0-100, unclamped


@dataclass(frozen=True)
class TrafficSnapshot:
    overall_congestion: float
    category: str
    streets: tuple[TrafficStreet, ...]


@dataclass(frozen=True)
class HistoryPoint:
    date: str  # ISO 8601 date
    pm25: float
    pm10: float
    no2: float
    o3: float | None = None


@dataclass(frozen=True)
class HeatmapPoint:
    lat: float | None
    lng: float | None
    value: float  # PM2.5, µg/m³
