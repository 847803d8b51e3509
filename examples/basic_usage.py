"""Basic usage examples for the envfeeds clients."""

import asyncio
import os

from envfeeds import AsyncOpenAQClient, AsyncOpenWeatherClient, AsyncWAQIClient, EnvFeedsError


async def main() -> None:
    waqi_token = os.getenv("WAQI_TOKEN")
    owm_key = os.getenv("OPENWEATHER_API_KEY")

    # Current air quality for a city
    if waqi_token:
        print("=== Air quality (WAQI) ===")
        async with AsyncWAQIClient(token=waqi_token) as waqi:
            feed = await waqi.city_feed("valencia")
        if feed.data is not None:
            print(f"  AQI {feed.data.aqi} (dominant: {feed.data.dominentpol})")
            for key in ("pm25", "pm10", "no2", "o3"):
                print(f"  {key}: {feed.data.pollutant_value(key)}")

    # Current weather
    if owm_key:
        print("\n=== Weather (OpenWeatherMap) ===")
        async with AsyncOpenWeatherClient(api_key=owm_key) as owm:
            weather = await owm.current_weather("Valencia,ES")
        if weather.main is not None:
            print(f"  {weather.name}: {weather.main.temp} °C, humidity {weather.main.humidity}%")

    # Nearby monitoring stations and their latest PM2.5 readings
    print("\n=== Stations near Valencia (OpenAQ) ===")
    async with AsyncOpenAQClient(api_key=os.getenv("OPENAQ_API_KEY")) as openaq:
        try:
            stations = await openaq.locations(coordinates=(39.4699, -0.3763), radius=25000, limit=3)
        except EnvFeedsError as exc:
            print(f"  OpenAQ unavailable: {exc}")
            return
        for s in stations:
            print(f"  {s.id}: {s.name}")

        if not stations:
            print("  No stations found.")
            return

        measurements = await openaq.measurements(location_id=stations[0].id, parameter="pm25", limit=5)
        for m in measurements:
            when = m.date.utc if m.date is not None else "?"
            print(f"  {when}: {m.value} {m.unit}")


if __name__ == "__main__":
    asyncio.run(main())
