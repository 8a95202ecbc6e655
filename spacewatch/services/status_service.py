"""
This module combines the ISS position and the local weather into a status report.
"""

import asyncio
from typing import Optional, Protocol

from spacewatch.definitions.data_sources import (
    DAY_PART_NAMES,
    MAX_VISIBLE_CLOUD_COVERAGE,
    DayPartCode,
)
from spacewatch.exceptions import TransportError
from spacewatch.models.iss import Position
from spacewatch.models.status import Status
from spacewatch.models.weather import WeatherCondition


class PositionProvider(Protocol):
    async def fetch_position(self) -> Position: ...


class WeatherProvider(Protocol):
    async def fetch_condition(self, position: Position, api_key: str) -> WeatherCondition: ...


def is_visible(cloud_coverage: int, day_part: str) -> bool:
    """
    Visibility of the station for the given weather.

    The station counts as visible during the day with cloud coverage of
    at most 30%.
    """
    return cloud_coverage <= MAX_VISIBLE_CLOUD_COVERAGE and day_part == DayPartCode.DAY.value


def day_part_name(code: str) -> str:
    """Map a part-of-day code to its display name; unknown codes map to ''."""
    return DAY_PART_NAMES.get(code, "")


def build_status(condition: WeatherCondition) -> Status:
    return Status(
        latitude=condition.latitude,
        longitude=condition.longitude,
        timezone=condition.timezone,
        cloud_coverage=condition.cloud_coverage_percent,
        day_part=day_part_name(condition.day_or_night),
        is_visible=is_visible(condition.cloud_coverage_percent, condition.day_or_night),
    )


class StatusService:
    """
    Produces ISS status reports.

    The lookup is a pipeline: the weather query needs the position, so the
    two upstream calls always run one after the other.
    """

    def __init__(self, position_provider: PositionProvider, weather_provider: WeatherProvider):
        self.position_provider = position_provider
        self.weather_provider = weather_provider

    async def get_status(self, api_key: str, deadline: Optional[float] = None) -> Status:
        """
        Build the status report for the current ISS position.

        Args:
            api_key: Key for the weather upstream
            deadline: Optional limit in seconds for the whole lookup; in-flight
                upstream calls are cancelled when it expires

        Raises:
            SpacewatchException: any error raised by either provider, unchanged
        """
        if deadline is None:
            return await self._lookup(api_key)

        try:
            async with asyncio.timeout(deadline):
                return await self._lookup(api_key)
        except TimeoutError as e:
            raise TransportError(f"status lookup exceeded deadline of {deadline}s") from e

    async def _lookup(self, api_key: str) -> Status:
        position = await self.position_provider.fetch_position()
        condition = await self.weather_provider.fetch_condition(position, api_key)
        return build_status(condition)
