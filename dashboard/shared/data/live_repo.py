"""Live repository backed by the WAQI, OpenWeatherMap and OpenAQ feeds."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from envfeeds import AsyncOpenAQClient, AsyncOpenWeatherClient, AsyncWAQIClient
from envfeeds.models.openweather import CurrentWeather
from envfeeds.models.waqi import WAQIFeed

from ..api_logging import get_logger, log_api_call
from ..constants import (
    CITY_CENTER,
    HISTORY_PARAMETERS,
    MEASUREMENTS_LIMIT,
    MICROGRAMS_PER_M3,
    STATION_SEARCH_LIMIT,
    STATION_SEARCH_RADIUS_M,
)
from ..data_helpers import aggregate_daily_averages
from ..settings import Settings
from .base import EnvDataRepository
from .errors import EnvDataError
from .simulated_repo import SimulatedRepository, now_timestamp
from .types import (
    AirQualitySnapshot,
    HistoryPoint,
    PollutantReading,
    TrafficSnapshot,
    WeatherSnapshot,
)

# (iaqi key, display name) in emission order
_IAQI_POLLUTANTS = (
    ("pm25", "PM2.5"),
    ("pm10", "PM10"),
    ("no2", "NO₂"),
)


# ── Normalizers ──────────────────────────────────────────────────────────────


def normalize_air_quality(feed: WAQIFeed) -> AirQualitySnapshot:
    """Map a WAQI feed onto a snapshot, defaulting each missing field."""
    data = feed.data
    pollutants: list[PollutantReading] = []
    if data is not None:
        for key, name in _IAQI_POLLUTANTS:
            value = data.pollutant_value(key)
            if value is not None:
                pollutants.append(PollutantReading(name, value, MICROGRAMS_PER_M3))

    aqi = data.aqi if data is not None else None
    category = data.dominentpol if data is not None else None
    observed = data.time.s if data is not None and data.time is not None else None
    return AirQualitySnapshot(
        aqi=aqi if aqi is not None else 0,
        category=category or "N/D",
        last_updated=observed or now_timestamp(),
        pollutants=tuple(pollutants),
    )


def normalize_weather(weather: CurrentWeather) -> WeatherSnapshot:
    """Map an OpenWeatherMap response onto a snapshot, defaulting each field to 0."""
    main = weather.main
    rain = weather.rain
    three_hour = rain.three_hour if rain is not None else None
    return WeatherSnapshot(
        temperature=(main.temp if main is not None else None) or 0,
        rain=(rain.one_hour if rain is not None else None) or 0,
        rain_probability=(weather.clouds.all if weather.clouds is not None else None) or 0,
        humidity=(main.humidity if main is not None else None) or 0,
        # Rough daily estimate from the 3h accumulation
        rain_24h=three_hour * 8 if three_hour else 0,
    )


# ── Repository class ─────────────────────────────────────────────────────────


class LiveRepository(EnvDataRepository):
    """Fetches live feeds, falling back to simulation per feed.

    Air quality and weather are simulated when their credential is not
    configured and raise ``EnvDataError`` on any fetch failure. Traffic has no
    live source. History never raises: every failure ends in simulation.
    """

    def __init__(self, settings: Settings, fallback: SimulatedRepository | None = None) -> None:
        self._settings = settings
        self._fallback = fallback or SimulatedRepository()

    @log_api_call
    async def get_air_quality(self) -> AirQualitySnapshot:
        if not self._settings.has_waqi_token:
            return await self._fallback.get_air_quality()
        try:
            async with AsyncWAQIClient(
                token=self._settings.waqi_token, timeout=self._settings.request_timeout,
            ) as waqi:
                feed = await waqi.city_feed(self._settings.city)
        except Exception as exc:
            raise EnvDataError(f"Failed to fetch air quality for {self._settings.city}: {exc}") from exc
        return normalize_air_quality(feed)

    @log_api_call
    async def get_weather(self) -> WeatherSnapshot:
        if not self._settings.has_openweather_key:
            return await self._fallback.get_weather()
        try:
            async with AsyncOpenWeatherClient(
                api_key=self._settings.openweather_api_key,
                timeout=self._settings.request_timeout,
            ) as owm:
                weather = await owm.current_weather(self._settings.weather_query)
        except Exception as exc:
            raise EnvDataError(
                f"Failed to fetch weather for {self._settings.weather_query}: {exc}",
            ) from exc
        return normalize_weather(weather)

    @log_api_call
    async def get_traffic(self) -> TrafficSnapshot:
        return await self._fallback.get_traffic()

    @log_api_call
    async def get_pollution_history(self, days: int) -> list[HistoryPoint]:
        try:
            history = await self._fetch_measured_history(days)
        except Exception as exc:
            get_logger().error("History fetch failed, simulating %d days: %s", days, exc)
            history = []
        if not history:
            return await self._fallback.get_pollution_history(days)
        return history

    async def _fetch_measured_history(self, days: int) -> list[HistoryPoint]:
        end = datetime.now(timezone.utc)
        start = end - timedelta(days=days)
        async with AsyncOpenAQClient(
            api_key=self._settings.openaq_api_key, timeout=self._settings.request_timeout,
        ) as openaq:
            location_id = await self._find_station(openaq)
            if location_id is None:
                return []
            measurements = await openaq.measurements(
                location_id=location_id,
                date_from=start,
                date_to=end,
                limit=MEASUREMENTS_LIMIT,
                parameter=HISTORY_PARAMETERS,
            )
        return aggregate_daily_averages(measurements)

    async def _find_station(self, openaq: AsyncOpenAQClient) -> int | None:
        """Return the id of the first station near the city centre, if any."""
        try:
            stations = await openaq.locations(
                coordinates=CITY_CENTER,
                radius=STATION_SEARCH_RADIUS_M,
                limit=STATION_SEARCH_LIMIT,
            )
        except Exception as exc:
            get_logger().warning("Station search failed, using simulated history: %s", exc)
            return None
        if not stations or stations[0].id is None:
            return None
        return stations[0].id
