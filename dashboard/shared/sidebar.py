"""Shared sidebar rendering for range selection and data-source status."""

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from .services.history import TimeRange
from .settings import DataMode, Settings

_RANGE_LABELS = {
    TimeRange.LAST_24H: "Last 24 hours",
    TimeRange.LAST_7D: "Last 7 days",
    TimeRange.LAST_30D: "Last 30 days",
}


@dataclass(frozen=True)
class DashboardSelection:
    """Result of the sidebar controls."""

    time_range: TimeRange
    refresh: bool


def _source_label(configured: bool, settings: Settings) -> str:
    if settings.data_mode == DataMode.SIMULATED or not configured:
        return "simulated"
    return "live"


def render_sidebar(settings: Settings) -> DashboardSelection:
    """Render the range selector, refresh button and per-feed source status."""
    st.sidebar.title("City Environment")

    selected = st.sidebar.radio(
        "Pollution history",
        list(_RANGE_LABELS),
        format_func=lambda r: _RANGE_LABELS[r],
    )
    refresh = st.sidebar.button("Refresh data")

    st.sidebar.markdown("### Data sources")
    st.sidebar.caption(f"Air quality: {_source_label(settings.has_waqi_token, settings)}")
    st.sidebar.caption(f"Weather: {_source_label(settings.has_openweather_key, settings)}")
    st.sidebar.caption("Traffic: simulated")
    history_source = "simulated" if settings.data_mode == DataMode.SIMULATED else "OpenAQ (simulated fallback)"
    st.sidebar.caption(f"History: {history_source}")

    return DashboardSelection(time_range=selected, refresh=refresh)
