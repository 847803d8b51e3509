"""World Air Quality Index (WAQI) feed models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class WAQITime(BaseModel):
    """Observation time block of a WAQI feed."""

    model_config = ConfigDict(frozen=True)

    s: str | None = None
    tz: str | None = None
    iso: str | None = None


class IAQIValue(BaseModel):
    """Individual pollutant sub-index (``iaqi.<pollutant>.v``)."""

    model_config = ConfigDict(frozen=True)

    v: float | None = None


class WAQIData(BaseModel):
    """The ``data`` block of a WAQI city feed."""

    model_config = ConfigDict(frozen=True)

    aqi: int | None = None
    idx: int | None = None
    dominentpol: str | None = None
    time: WAQITime | None = None
    iaqi: dict[str, IAQIValue] = {}

    @field_validator("aqi", mode="before")
    @classmethod
    def _missing_aqi(cls, value: Any) -> Any:
        # Stations without a current reading report "-"
        if isinstance(value, str) and not value.strip().lstrip("-").isdigit():
            return None
        return value

    def pollutant_value(self, key: str) -> float | None:
        """Return ``iaqi.<key>.v`` or None when the sub-reading is absent."""
        reading = self.iaqi.get(key)
        return reading.v if reading is not None else None


class WAQIFeed(BaseModel):
    """Top-level WAQI feed response."""

    model_config = ConfigDict(frozen=True)

    status: str | None = None
    data: WAQIData | None = None
