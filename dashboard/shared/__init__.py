"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import HEATMAP_COLORSCALE, MICROGRAMS_PER_M3, PLOTLY_LAYOUT_DEFAULTS
from .formatters import format_concentration, format_day_month, grey_palette

# --- Configuration & data layer ---
from .data import EnvDataError, get_repository
from .settings import DataMode, Settings, get_settings

# --- Service layer ---
from .services import (
    ChartSeries,
    EnvironmentAggregator,
    SnapshotKind,
    TimeRange,
    clamp_percentage,
    classify_air_quality,
    normalize_intensity,
    pollutant_percentage,
    station_markers,
    to_heat_layer,
)

__all__ = [
    "ChartSeries",
    "DataMode",
    "EnvDataError",
    "EnvironmentAggregator",
    "HEATMAP_COLORSCALE",
    "MICROGRAMS_PER_M3",
    "PLOTLY_LAYOUT_DEFAULTS",
    "Settings",
    "SnapshotKind",
    "TimeRange",
    "clamp_percentage",
    "classify_air_quality",
    "format_concentration",
    "format_day_month",
    "get_repository",
    "get_settings",
    "grey_palette",
    "normalize_intensity",
    "pollutant_percentage",
    "station_markers",
    "to_heat_layer",
]
