"""Abstract base repository for environmental data access."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .types import AirQualitySnapshot, HistoryPoint, TrafficSnapshot, WeatherSnapshot


class EnvDataRepository(ABC):
    """Source-agnostic interface for environmental data access."""

    @abstractmethod
    async def get_air_quality(self) -> AirQualitySnapshot: ...

    @abstractmethod
    async def get_weather(self) -> WeatherSnapshot: ...

    @abstractmethod
    async def get_traffic(self) -> TrafficSnapshot: ...

    @abstractmethod
    async def get_pollution_history(self, days: int) -> list[HistoryPoint]:
        """Return daily averages for the last *days* days, sorted by date.

        Implementations never raise and never return an empty list.
        """
