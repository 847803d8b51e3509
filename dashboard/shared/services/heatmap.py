"""Synthetic PM2.5 heat layer built from one city-wide reading.

Only the reference stations carry (scaled) real data. Interpolated and
ring points exist to give the heat layer a smooth, dense field.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations

from ..constants import (
    INNER_RING_POINTS,
    INNER_RING_RADIUS_DEG,
    INTERPOLATION_MAX_KM,
    OUTER_RING_POINTS,
    OUTER_RING_RADIUS_DEG,
    REFERENCE_STATIONS,
    ReferenceStation,
)
from ..data.types import HeatmapPoint
from .common import AirQualityLevel, classify_air_quality, normalize_intensity

_EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class StationMarker:
    index: int  # 1-based, as shown in the popup
    name: str
    point: HeatmapPoint
    level: AirQualityLevel


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two coordinates in kilometres."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = phi2 - phi1
    dlmb = math.radians(lng2 - lng1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    return 2 * _EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def positional_jitter(lat: float, lng: float) -> float:
    """Deterministic factor in [0.90, 1.09] derived from a coordinate."""
    seed = int(abs(lat) * 10_000 + abs(lng) * 10_000)
    return 0.9 + (seed % 20) / 100


def station_points(
    pm25: float,
    stations: Sequence[ReferenceStation] = REFERENCE_STATIONS,
) -> list[HeatmapPoint]:
    """Scale *pm25* by each station's factor and positional jitter."""
    return [
        HeatmapPoint(s.lat, s.lng, pm25 * s.factor * positional_jitter(s.lat, s.lng))
        for s in stations
    ]


def interpolate_between(
    points: Sequence[HeatmapPoint],
    rng: random.Random,
    max_km: float = INTERPOLATION_MAX_KM,
) -> list[HeatmapPoint]:
    """Insert 2-3 jittered points between every pair closer than *max_km*."""
    result: list[HeatmapPoint] = []
    for a, b in combinations(points, 2):
        if a.lat is None or a.lng is None or b.lat is None or b.lng is None:
            continue
        if haversine_km(a.lat, a.lng, b.lat, b.lng) >= max_km:
            continue
        count = rng.choice((2, 3))
        for step in range(1, count + 1):
            t = step / (count + 1) + rng.uniform(-0.05, 0.05)
            lat = a.lat + (b.lat - a.lat) * t + rng.uniform(-0.0008, 0.0008)
            lng = a.lng + (b.lng - a.lng) * t + rng.uniform(-0.0008, 0.0008)
            value = (a.value + (b.value - a.value) * t) * rng.uniform(0.9, 1.1)
            result.append(HeatmapPoint(lat, lng, value))
    return result


def _ring(
    center: HeatmapPoint,
    count: int,
    radius: float,
    value_range: tuple[float, float],
    rng: random.Random,
) -> list[HeatmapPoint]:
    step = 2 * math.pi / count
    ring: list[HeatmapPoint] = []
    for i in range(count):
        angle = i * step + rng.uniform(-step / 4, step / 4)
        r = radius * rng.uniform(0.8, 1.2)
        ring.append(HeatmapPoint(
            center.lat + r * math.sin(angle),
            center.lng + r * math.cos(angle),
            center.value * rng.uniform(*value_range),
        ))
    return ring


def ring_points(points: Sequence[HeatmapPoint], rng: random.Random) -> list[HeatmapPoint]:
    """Surround every point with an inner and an outer ring of weaker points."""
    result: list[HeatmapPoint] = []
    for p in points:
        if p.lat is None or p.lng is None:
            continue
        result.extend(_ring(p, INNER_RING_POINTS, INNER_RING_RADIUS_DEG, (0.85, 1.0), rng))
        result.extend(_ring(p, OUTER_RING_POINTS, OUTER_RING_RADIUS_DEG, (0.7, 0.9), rng))
    return result


def build_heatmap(pm25: float, rng: random.Random | None = None) -> list[HeatmapPoint]:
    """Stations first, then interpolated points, then rings."""
    rng = rng or random.Random()
    stations = station_points(pm25)
    return stations + interpolate_between(stations, rng) + ring_points(stations, rng)


def is_renderable(point: HeatmapPoint) -> bool:
    return bool(point.lat) and bool(point.lng) and point.value > 0


def to_heat_layer(points: Sequence[HeatmapPoint]) -> list[tuple[float, float, float]]:
    """Return (lat, lng, intensity) triples for the renderable points."""
    return [
        (p.lat, p.lng, normalize_intensity(p.value))  # type: ignore[misc]
        for p in points
        if is_renderable(p)
    ]


def station_markers(
    points: Sequence[HeatmapPoint],
    stations: Sequence[ReferenceStation] = REFERENCE_STATIONS,
) -> list[StationMarker]:
    """Markers for the leading station points of a heatmap."""
    return [
        StationMarker(
            index=i + 1,
            name=station.name,
            point=point,
            level=classify_air_quality(point.value),
        )
        for i, (station, point) in enumerate(zip(stations, points))
    ]
