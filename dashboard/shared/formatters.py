"""Formatting helpers for the environmental dashboard."""

from __future__ import annotations

from datetime import date


def format_hour_label(hour: int) -> str:
    """Format an hour of day as HH:00."""
    return f"{hour:02d}:00"


def format_day_month(iso_date: str) -> str:
    """Format an ISO date string as 'DD Mon', or return it unchanged if unparseable."""
    try:
        parsed = date.fromisoformat(iso_date[:10])
    except ValueError:
        return iso_date
    return parsed.strftime("%d %b")


def format_concentration(value: float | None, unit: str = "µg/m³") -> str:
    """Format a concentration with one decimal, or '—' if None."""
    if value is None:
        return "—"
    return f"{value:.1f} {unit}"


def grey_palette(count: int) -> list[str]:
    """Return *count* RGBA greys getting lighter from left to right."""
    colors: list[str] = []
    for i in range(count):
        grey = round(100 + i * (155 / count))
        colors.append(f"rgba({grey}, {grey}, {grey}, 0.8)")
    return colors
