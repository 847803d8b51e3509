"""OpenAQ v2 location and measurement models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Coordinates(BaseModel):
    """Latitude/longitude pair."""

    model_config = ConfigDict(frozen=True)

    latitude: float | None = None
    longitude: float | None = None


class Location(BaseModel):
    """A monitoring station returned by ``/v2/locations``."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str | None = None
    city: str | None = None
    country: str | None = None
    coordinates: Coordinates | None = None


class MeasurementDate(BaseModel):
    """UTC and local timestamps of a measurement."""

    model_config = ConfigDict(frozen=True)

    utc: datetime | None = None
    local: str | None = None


class Measurement(BaseModel):
    """A single raw measurement returned by ``/v2/measurements``."""

    model_config = ConfigDict(frozen=True)

    location_id: int | None = None
    parameter: str | None = None
    value: float | None = None
    unit: str | None = None
    date: MeasurementDate | None = None
