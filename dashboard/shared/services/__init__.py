"""Service layer — aggregation and presentation logic for the dashboard."""

from .aggregator import EnvironmentAggregator, SnapshotKind
from .common import (
    AirQualityLevel,
    clamp_percentage,
    classify_air_quality,
    find_pollutant,
    normalize_intensity,
    pollutant_percentage,
    with_display_max,
)
from .heatmap import StationMarker, build_heatmap, station_markers, to_heat_layer
from .history import ChartSeries, TimeRange, daily_projection, hourly_projection, project_history

__all__ = [
    "AirQualityLevel",
    "ChartSeries",
    "EnvironmentAggregator",
    "SnapshotKind",
    "StationMarker",
    "TimeRange",
    "build_heatmap",
    "clamp_percentage",
    "classify_air_quality",
    "daily_projection",
    "find_pollutant",
    "hourly_projection",
    "normalize_intensity",
    "pollutant_percentage",
    "project_history",
    "station_markers",
    "to_heat_layer",
    "with_display_max",
]
