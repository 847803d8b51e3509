"""envfeeds — Typed async clients for air-quality and weather feeds."""

from envfeeds.client import AsyncOpenAQClient, AsyncOpenWeatherClient, AsyncWAQIClient
from envfeeds.exceptions import (
    EnvFeedsAPIError,
    EnvFeedsConnectionError,
    EnvFeedsError,
    EnvFeedsTimeoutError,
    EnvFeedsValidationError,
)

__all__ = [
    "AsyncOpenAQClient",
    "AsyncOpenWeatherClient",
    "AsyncWAQIClient",
    "EnvFeedsAPIError",
    "EnvFeedsConnectionError",
    "EnvFeedsError",
    "EnvFeedsTimeoutError",
    "EnvFeedsValidationError",
]

__version__ = "0.1.0"
