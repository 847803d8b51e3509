"""City Environment Dashboard — Streamlit + Plotly over WAQI, OpenWeatherMap and OpenAQ."""

from __future__ import annotations

import asyncio
from datetime import datetime

import plotly.graph_objects as go
import streamlit as st

from shared import (
    HEATMAP_COLORSCALE,
    PLOTLY_LAYOUT_DEFAULTS,
    EnvironmentAggregator,
    SnapshotKind,
    TimeRange,
    clamp_percentage,
    format_concentration,
    get_repository,
    get_settings,
    grey_palette,
    pollutant_percentage,
    station_markers,
    to_heat_layer,
)
from shared.constants import ACCENT_GREEN, CITY_CENTER, MAP_BOUNDS, MAP_ZOOM
from shared.sidebar import render_sidebar

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="City Environment",
    page_icon="\U0001f33f",
    layout="wide",
)

settings = get_settings()


# ── Session-scoped aggregator ────────────────────────────────────────────────


def _record_publish(kind: SnapshotKind, _value: object) -> None:
    st.session_state.setdefault("published_at", {})[kind.value] = datetime.now()


if "aggregator" not in st.session_state:
    aggregator = EnvironmentAggregator(get_repository(settings))
    aggregator.subscribe(_record_publish)
    st.session_state["aggregator"] = aggregator
    st.session_state["history_range"] = None
    st.session_state["city_loaded"] = False

aggregator: EnvironmentAggregator = st.session_state["aggregator"]

selection = render_sidebar(settings)

with st.spinner("Loading city data..."):
    if selection.refresh or not st.session_state["city_loaded"]:
        asyncio.run(aggregator.load_city_data())
        st.session_state["city_loaded"] = True
    if selection.refresh or st.session_state["history_range"] != selection.time_range:
        asyncio.run(aggregator.load_pollution_history(selection.time_range.days))
        st.session_state["history_range"] = selection.time_range


# ── Header ───────────────────────────────────────────────────────────────────

st.markdown(f"# {settings.city.title()} environment")

air = aggregator.display_air_quality()
weather = aggregator.weather
traffic = aggregator.traffic

kpi1, kpi2, kpi3, kpi4 = st.columns(4)
if air is not None:
    kpi1.metric("AQI", air.aqi, help=f"Updated {air.last_updated}")
    kpi2.metric("Category", air.category)
else:
    kpi1.metric("AQI", "—")
    kpi2.metric("Category", "—")
if weather is not None:
    kpi3.metric("Temperature", f"{weather.temperature:.1f} °C")
    kpi4.metric("Humidity", f"{weather.humidity:.0f} %")
else:
    kpi3.metric("Temperature", "—")
    kpi4.metric("Humidity", "—")


# ── Pollutant gauges ─────────────────────────────────────────────────────────

st.subheader("Pollutants")

if air is None or not air.pollutants:
    st.info("No air-quality readings available.")
else:
    gauge_cols = st.columns(len(air.pollutants))
    for col, reading in zip(gauge_cols, air.pollutants):
        fig = go.Figure(go.Indicator(
            mode="gauge+number",
            value=reading.value,
            number={"suffix": f" {reading.unit}"},
            title={"text": reading.name},
            gauge={
                "axis": {"range": [0, reading.max]},
                "bar": {"color": ACCENT_GREEN},
            },
        ))
        fig.update_layout(**PLOTLY_LAYOUT_DEFAULTS, height=220)
        col.plotly_chart(fig, use_container_width=True)
        col.caption(f"{pollutant_percentage(reading):.0f}% of scale")


# ── Weather & traffic ────────────────────────────────────────────────────────

weather_col, traffic_col = st.columns(2)

with weather_col:
    st.subheader("Weather")
    if weather is None:
        st.info("Weather unavailable.")
    else:
        w1, w2, w3 = st.columns(3)
        w1.metric("Rain (1h)", f"{weather.rain:.1f} mm")
        w2.metric("Rain probability", f"{weather.rain_probability:.0f} %")
        w3.metric("Rain (24h est.)", f"{weather.rain_24h:.1f} mm")

with traffic_col:
    st.subheader("Traffic")
    if traffic is None:
        st.info("Traffic unavailable.")
    else:
        st.metric(traffic.category, f"{clamp_percentage(traffic.overall_congestion):.0f} %")
        for street in traffic.streets:
            pct = clamp_percentage(street.congestion)
            st.progress(int(pct), text=f"{street.name} — {pct:.0f} %")


# ── Pollution history ────────────────────────────────────────────────────────

st.subheader("Pollution history")

series = aggregator.history_series(selection.time_range)
if not series.labels:
    st.info("No pollution history available.")
else:
    hover = [
        f"PM2.5: {format_concentration(a)}<br>PM10: {format_concentration(b)}<br>NO2: {format_concentration(c)}"
        for a, b, c in zip(series.pm25, series.pm10, series.no2)
    ]
    fig = go.Figure(go.Bar(
        x=list(series.labels),
        y=list(series.combined),
        marker_color=grey_palette(len(series.labels)),
        marker_line_color="#666",
        marker_line_width=1,
        hovertext=hover,
        hoverinfo="text",
    ))
    fig.update_layout(**PLOTLY_LAYOUT_DEFAULTS, height=320, yaxis_title="µg/m³")
    st.plotly_chart(fig, use_container_width=True)
    if selection.time_range == TimeRange.LAST_24H:
        st.caption("Hourly values are estimated from the latest daily average.")


# ── Heat map ─────────────────────────────────────────────────────────────────

st.subheader("PM2.5 heat map")

points = aggregator.heatmap_points()
heat = to_heat_layer(points)
if not heat:
    st.info("No pollution data to map.")
else:
    lats, lngs, intensities = zip(*heat)
    markers = station_markers(points)
    (south, west), (north, east) = MAP_BOUNDS
    fig = go.Figure()
    fig.add_trace(go.Densitymap(
        lat=lats,
        lon=lngs,
        z=intensities,
        radius=40,
        zmin=0,
        zmax=1,
        colorscale=HEATMAP_COLORSCALE,
        showscale=False,
        hoverinfo="skip",
    ))
    fig.add_trace(go.Scattermap(
        lat=[m.point.lat for m in markers],
        lon=[m.point.lng for m in markers],
        mode="markers",
        marker={"size": 12, "color": [m.level.color for m in markers]},
        text=[
            f"Station {m.index} · {m.name}<br>{format_concentration(m.point.value)} PM2.5<br>{m.level.label}"
            for m in markers
        ],
        hoverinfo="text",
    ))
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        height=520,
        showlegend=False,
        map={
            "style": "open-street-map",
            "center": {"lat": CITY_CENTER[0], "lon": CITY_CENTER[1]},
            "zoom": MAP_ZOOM,
            "bounds": {"south": south, "west": west, "north": north, "east": east},
        },
    )
    st.plotly_chart(fig, use_container_width=True)

published = st.session_state.get("published_at", {})
if published:
    st.caption(
        "Last published: "
        + ", ".join(f"{kind} {at:%H:%M:%S}" for kind, at in sorted(published.items()))
    )
