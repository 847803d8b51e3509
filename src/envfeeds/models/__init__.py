"""Upstream feed data models."""

from envfeeds.models.openaq import Coordinates, Location, Measurement, MeasurementDate
from envfeeds.models.openweather import Clouds, CurrentWeather, MainBlock, Rain
from envfeeds.models.waqi import IAQIValue, WAQIData, WAQIFeed, WAQITime

__all__ = [
    "Clouds",
    "Coordinates",
    "CurrentWeather",
    "IAQIValue",
    "Location",
    "MainBlock",
    "Measurement",
    "MeasurementDate",
    "Rain",
    "WAQIData",
    "WAQIFeed",
    "WAQITime",
]
