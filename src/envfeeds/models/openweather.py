"""OpenWeatherMap current-weather models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MainBlock(BaseModel):
    """Temperature, pressure and humidity block."""

    model_config = ConfigDict(frozen=True)

    temp: float | None = None
    feels_like: float | None = None
    pressure: float | None = None
    humidity: float | None = None


class Clouds(BaseModel):
    """Cloudiness in percent."""

    model_config = ConfigDict(frozen=True)

    all: float | None = None


class Rain(BaseModel):
    """Precipitation volume for the last one and three hours (mm)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    one_hour: float | None = Field(default=None, alias="1h")
    three_hour: float | None = Field(default=None, alias="3h")


class CurrentWeather(BaseModel):
    """Response of ``/data/2.5/weather``."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    dt: int | None = None
    main: MainBlock | None = None
    clouds: Clouds | None = None
    rain: Rain | None = None
