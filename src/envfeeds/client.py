"""Public async client classes for the upstream environmental feeds."""

from __future__ import annotations

from typing import Any, Self, TypeVar

from pydantic import BaseModel, TypeAdapter

from envfeeds._http import DEFAULT_TIMEOUT, AsyncTransport
from envfeeds._params import build_query_params
from envfeeds.exceptions import EnvFeedsAPIError, EnvFeedsValidationError
from envfeeds.models.openaq import Location, Measurement
from envfeeds.models.openweather import CurrentWeather
from envfeeds.models.waqi import WAQIFeed

WAQI_BASE_URL = "https://api.waqi.info"
OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
OPENAQ_BASE_URL = "https://api.openaq.org/v2"

_ModelT = TypeVar("_ModelT", bound=BaseModel)
_T = TypeVar("_T")


def _validate(model_type: type[_ModelT], data: Any) -> _ModelT:
    """Validate a single JSON object against a Pydantic model."""
    try:
        return model_type.model_validate(data)
    except Exception as exc:
        raise EnvFeedsValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


def _validate_list(model_type: type[_T], data: Any) -> list[_T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise EnvFeedsValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class _AsyncFeedClient:
    """Shared lifecycle for the feed clients."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout, headers=headers)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def _get_json(self, endpoint: str, **kwargs: Any) -> Any:
        params = build_query_params(**kwargs)
        return await self._transport.get(endpoint, params)


class AsyncWAQIClient(_AsyncFeedClient):
    """Asynchronous client for the World Air Quality Index city feed.

    Usage:
        async with AsyncWAQIClient(token="...") as waqi:
            feed = await waqi.city_feed("valencia")
    """

    def __init__(
        self,
        token: str,
        base_url: str = WAQI_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout)
        self._token = token

    async def city_feed(self, city: str) -> WAQIFeed:
        """Get the current air-quality feed for a city."""
        data = await self._get_json(f"/feed/{city}/", token=self._token)
        if isinstance(data, dict) and data.get("status") == "error":
            raise EnvFeedsAPIError(status_code=200, message=str(data.get("data")))
        return _validate(WAQIFeed, data)


class AsyncOpenWeatherClient(_AsyncFeedClient):
    """Asynchronous client for the OpenWeatherMap current-weather endpoint.

    Usage:
        async with AsyncOpenWeatherClient(api_key="...") as owm:
            weather = await owm.current_weather("Valencia,ES")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout)
        self._api_key = api_key

    async def current_weather(
        self,
        query: str,
        units: str = "metric",
        lang: str = "es",
    ) -> CurrentWeather:
        """Get current weather conditions for a ``City,CC`` query."""
        data = await self._get_json(
            "/weather", q=query, units=units, appid=self._api_key, lang=lang,
        )
        return _validate(CurrentWeather, data)


class AsyncOpenAQClient(_AsyncFeedClient):
    """Asynchronous client for the OpenAQ v2 API.

    Usage:
        async with AsyncOpenAQClient() as openaq:
            stations = await openaq.locations(coordinates=(39.4699, -0.3763), radius=50000)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OPENAQ_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        headers = {"X-API-Key": api_key} if api_key else None
        super().__init__(base_url=base_url, timeout=timeout, headers=headers)

    async def _get_results(self, endpoint: str, model: type[Any], **kwargs: Any) -> list[Any]:
        data = await self._get_json(endpoint, **kwargs)
        results = data.get("results") if isinstance(data, dict) else None
        return _validate_list(model, results or [])

    async def locations(self, **kwargs: Any) -> list[Location]:
        """Search monitoring stations (``coordinates``, ``radius``, ``limit``...)."""
        return await self._get_results("/locations", Location, **kwargs)

    async def measurements(self, **kwargs: Any) -> list[Measurement]:
        """Get raw measurements (``location_id``, ``date_from``, ``parameter``...)."""
        return await self._get_results("/measurements", Measurement, **kwargs)
