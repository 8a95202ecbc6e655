"""
Client for the weatherbit current-conditions API.

To read more about obtaining an API key see https://www.weatherbit.io/api
"""

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx
from pydantic import ValidationError

from spacewatch.exceptions import (
    EmptyDataError,
    ParseError,
    TimezoneError,
    TransportError,
    UpstreamStatusError,
)
from spacewatch.models.iss import Position
from spacewatch.models.weather import WeatherbitResponse, WeatherCondition

DEFAULT_WEATHER_API_URL = "https://api.weatherbit.io"
DEFAULT_TIMEOUT = 10.0
CURRENT_CONDITIONS_PATH = "/v2.0/current"


def calculate_local_time(timezone: str) -> datetime:
    """
    Return the current wall-clock time in the given IANA timezone,
    for example "Africa/Johannesburg".
    """
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise TimezoneError(f"loading location {timezone!r}: {e}") from e
    return datetime.now(tz)


class WeatherbitClient:
    """
    Fetches current weather conditions for a geographical position.

    The API key is supplied per call so a single client can be shared
    between requests; the base URL and timeout never change after
    construction.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_WEATHER_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http_client = http_client

    @property
    def url(self) -> str:
        return f"{self.base_url}{CURRENT_CONDITIONS_PATH}"

    async def fetch_condition(self, position: Position, api_key: str) -> WeatherCondition:
        """
        Return the weather condition at the given position.

        Raises:
            TransportError: the request could not complete or timed out
            UpstreamStatusError: the API answered with a non-200 status
            ParseError: the body or its first record is malformed
            EmptyDataError: the API reported no records
            TimezoneError: the reported timezone is unknown
        """
        params = {
            "lat": f"{position.latitude:.4f}",
            "lon": f"{position.longitude:.4f}",
            "key": api_key,
        }
        response = await self._get(params)

        if response.status_code != httpx.codes.OK:
            raise UpstreamStatusError(
                f"error getting information from weather api: status {response.status_code}",
                status_code=response.status_code,
            )
        return self._parse_response(response)

    async def get_condition(
        self, latitude: float, longitude: float, api_key: str
    ) -> WeatherCondition:
        """Return the weather condition for a bare latitude/longitude pair."""
        return await self.fetch_condition(
            Position(latitude=latitude, longitude=longitude), api_key
        )

    async def _get(self, params: dict) -> httpx.Response:
        try:
            if self.http_client is not None:
                return await self.http_client.get(
                    self.url, params=params, timeout=self.timeout
                )
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.get(self.url, params=params)
        except httpx.HTTPError as e:
            # The request URL carries the API key, so only the path is reported.
            raise TransportError(
                f"error contacting weather api at {self.url}: {type(e).__name__}"
            ) from e

    @staticmethod
    def _parse_response(response: httpx.Response) -> WeatherCondition:
        try:
            payload = WeatherbitResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ParseError(f"decoding weather api response: {e}") from e

        if not payload.data:
            raise EmptyDataError(
                "missing data in response body received from weather service"
            )

        record = payload.data[0]
        local_time = calculate_local_time(record.timezone)

        try:
            return WeatherCondition(
                latitude=record.lat,
                longitude=record.lon,
                timezone=record.timezone,
                local_time=local_time,
                day_or_night=record.pod,
                cloud_coverage_percent=record.clouds,
            )
        except ValidationError as e:
            raise ParseError(f"invalid weather record: {e}") from e
