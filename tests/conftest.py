"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

WAQI_BASE_URL = "https://api.waqi.info"
OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
OPENAQ_BASE_URL = "https://api.openaq.org/v2"


SAMPLE_WAQI_FEED = {
    "status": "ok",
    "data": {
        "aqi": 58,
        "idx": 8180,
        "dominentpol": "pm25",
        "time": {"s": "2024-10-05 14:00:00", "tz": "+02:00", "iso": "2024-10-05T14:00:00+02:00"},
        "iaqi": {
            "pm25": {"v": 58},
            "pm10": {"v": 21},
            "no2": {"v": 9.2},
            "o3": {"v": 31.4},
            "t": {"v": 24},
        },
    },
}

SAMPLE_WAQI_ERROR = {"status": "error", "data": "Invalid key"}

SAMPLE_OPENWEATHER = {
    "name": "Valencia",
    "dt": 1728136800,
    "main": {"temp": 23.4, "feels_like": 23.6, "pressure": 1016, "humidity": 71},
    "clouds": {"all": 40},
    "rain": {"1h": 0.6, "3h": 1.2},
}

SAMPLE_LOCATIONS = {
    "meta": {"found": 2},
    "results": [
        {
            "id": 3283,
            "name": "València - Pista de Silla",
            "city": "Valencia",
            "country": "ES",
            "coordinates": {"latitude": 39.458, "longitude": -0.3766},
        },
        {"id": 3290, "name": "València - Politècnic"},
    ],
}

SAMPLE_MEASUREMENTS = {
    "meta": {"found": 4},
    "results": [
        {
            "location_id": 3283,
            "parameter": "pm25",
            "value": 10,
            "unit": "µg/m³",
            "date": {"utc": "2024-10-04T10:00:00+00:00", "local": "2024-10-04T12:00:00+02:00"},
        },
        {
            "location_id": 3283,
            "parameter": "pm25",
            "value": 20,
            "unit": "µg/m³",
            "date": {"utc": "2024-10-04T22:00:00+00:00", "local": "2024-10-05T00:00:00+02:00"},
        },
        {
            "location_id": 3283,
            "parameter": "pm10",
            "value": 5,
            "unit": "µg/m³",
            "date": {"utc": "2024-10-05T08:00:00+00:00", "local": "2024-10-05T10:00:00+02:00"},
        },
        {
            "location_id": 3283,
            "parameter": "o3",
            "value": 40,
            "unit": "µg/m³",
            "date": {"utc": "2024-10-03T08:00:00+00:00", "local": "2024-10-03T10:00:00+02:00"},
        },
    ],
}


@pytest.fixture
def openaq_base_url() -> str:
    return OPENAQ_BASE_URL
