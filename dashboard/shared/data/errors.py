"""Source-agnostic data fetch error."""

from __future__ import annotations


class EnvDataError(Exception):
    """Source-agnostic data fetch error raised by live repositories."""
