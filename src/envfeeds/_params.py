"""Query parameter builder for the upstream feed APIs."""

from __future__ import annotations

from datetime import datetime
from typing import Any


def _format_value(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(v) for v in value)
    return str(value)


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    ``None`` values are dropped. Datetimes are rendered as ISO-8601 and
    sequences are comma-joined (``parameter=pm25,pm10``), which is how WAQI,
    OpenWeatherMap and OpenAQ all accept multi-valued filters.

    Args:
        **kwargs: Keyword arguments where keys are parameter names.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, _format_value(value)))
    return params
