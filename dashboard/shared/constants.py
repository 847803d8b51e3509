"""Shared constants for the environmental dashboard."""

from __future__ import annotations

from typing import NamedTuple

ACCENT_GREEN = "#2E8B57"

MICROGRAMS_PER_M3 = "µg/m³"

# ── Reference location ───────────────────────────────────────────────────────

CITY_CENTER = (39.4699, -0.3763)
STATION_SEARCH_RADIUS_M = 50000
STATION_SEARCH_LIMIT = 5
MEASUREMENTS_LIMIT = 1000
HISTORY_PARAMETERS = ("pm25", "pm10", "no2", "o3")

MAP_BOUNDS = ((39.42, -0.42), (39.52, -0.32))  # south-west, north-east
MAP_ZOOM = 11

# ── Pollutants ───────────────────────────────────────────────────────────────

POLLUTANT_DISPLAY_MAX: dict[str, float] = {
    "PM2.5": 100,
    "PM10": 100,
    "NO₂": 100,
    "NO2": 100,
    "O3": 100,
}
DEFAULT_DISPLAY_MAX = 100.0

# Baseline daily averages used when no history can be fetched
HISTORY_BASELINE: dict[str, float] = {"pm25": 45, "pm10": 62, "no2": 38, "o3": 72}
DEFAULT_PM25 = 45.0

# Commute-shaped multipliers for the synthetic 24h view
HOURLY_FACTORS: dict[int, float] = {
    0: 0.85,
    4: 0.75,
    8: 1.15,
    12: 1.25,
    16: 1.35,
    20: 1.10,
}

# ── Air-quality bands (PM2.5, µg/m³) ─────────────────────────────────────────


class AirQualityBand(NamedTuple):
    upper: float
    intensity: float  # normalized intensity reached at `upper`
    label: str
    color: str


AIR_QUALITY_BANDS: tuple[AirQualityBand, ...] = (
    AirQualityBand(12.0, 0.2, "Good", "#00ff00"),
    AirQualityBand(35.4, 0.4, "Moderate", "#ffff00"),
    AirQualityBand(55.4, 0.6, "Unhealthy for sensitive groups", "#ff9900"),
    AirQualityBand(150.4, 0.8, "Unhealthy", "#ff0000"),
    AirQualityBand(250.4, 0.9, "Very unhealthy", "#990099"),
    AirQualityBand(500.0, 1.0, "Hazardous", "#660000"),
)

HEATMAP_COLORSCALE: list[list[float | str]] = [
    [0.0, "#00ff00"],
    [0.15, "#80ff00"],
    [0.3, "#ffff00"],
    [0.45, "#ffcc00"],
    [0.5, "#ff9900"],
    [0.65, "#ff6600"],
    [0.7, "#ff0000"],
    [0.85, "#cc0066"],
    [0.9, "#990099"],
    [0.95, "#660066"],
    [1.0, "#330033"],
]

# ── Reference stations ───────────────────────────────────────────────────────


class ReferenceStation(NamedTuple):
    name: str
    lat: float
    lng: float
    factor: float  # intensity relative to the city-wide PM2.5 reading


REFERENCE_STATIONS: tuple[ReferenceStation, ...] = (
    ReferenceStation("Avda. Francia", 39.4578, -0.3429, 1.05),
    ReferenceStation("Bulevard Sud", 39.4504, -0.3963, 1.20),
    ReferenceStation("Molí del Sol", 39.4811, -0.4087, 0.90),
    ReferenceStation("Pista de Silla", 39.4580, -0.3766, 1.30),
    ReferenceStation("Politècnic", 39.4796, -0.3374, 0.85),
    ReferenceStation("Viveros", 39.4796, -0.3696, 0.80),
    ReferenceStation("Centre", 39.4705, -0.3764, 1.25),
    ReferenceStation("Conselleria Meteo", 39.4741, -0.3967, 1.00),
    ReferenceStation("Natzaret", 39.4484, -0.3335, 1.15),
    ReferenceStation("Port de València", 39.4598, -0.3235, 1.20),
    ReferenceStation("Benimaclet", 39.4853, -0.3587, 0.95),
    ReferenceStation("Campanar", 39.4839, -0.3942, 0.90),
    ReferenceStation("Russafa", 39.4617, -0.3738, 1.10),
    ReferenceStation("Patraix", 39.4602, -0.3939, 1.00),
    ReferenceStation("Malilla", 39.4483, -0.3773, 1.05),
    ReferenceStation("El Cabanyal", 39.4706, -0.3300, 0.85),
    ReferenceStation("Torrefiel", 39.4925, -0.3780, 0.95),
    ReferenceStation("Benicalap", 39.4963, -0.3936, 0.90),
)

INTERPOLATION_MAX_KM = 2.5
INNER_RING_POINTS = 6
OUTER_RING_POINTS = 4
INNER_RING_RADIUS_DEG = 0.004
OUTER_RING_RADIUS_DEG = 0.008

# ── Plotly ───────────────────────────────────────────────────────────────────

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    margin=dict(l=40, r=20, t=40, b=40),
)
