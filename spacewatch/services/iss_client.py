"""
Client for the open-notify International Space Station location API.

More information about the API: http://open-notify.org/Open-Notify-API/
"""

from typing import Optional, Tuple

import httpx
from pydantic import ValidationError

from spacewatch.exceptions import ParseError, TransportError, UpstreamStatusError
from spacewatch.models.iss import ISSNowResponse, Position

DEFAULT_ISS_API_URL = "http://api.open-notify.org/iss-now.json"
DEFAULT_TIMEOUT = 10.0


class ISSClient:
    """
    Fetches the current position of the International Space Station.

    The client holds only immutable configuration. When no shared
    ``httpx.AsyncClient`` is supplied, a short-lived one is opened per call.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_ISS_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.http_client = http_client

    async def fetch_position(self) -> Position:
        """
        Return the station coordinates at the time of the request.

        Raises:
            TransportError: the request could not complete or timed out
            UpstreamStatusError: the API answered with a non-200 status
            ParseError: the body or the coordinates are malformed
        """
        response = await self._get()

        if response.status_code != httpx.codes.OK:
            raise UpstreamStatusError(
                f"unexpected response status code from iss api: {response.status_code}",
                status_code=response.status_code,
            )
        return self._parse_response(response)

    async def get_position(self) -> Tuple[float, float]:
        """Return the station coordinates as a ``(latitude, longitude)`` pair."""
        position = await self.fetch_position()
        return position.latitude, position.longitude

    async def _get(self) -> httpx.Response:
        headers = {"Accept": "application/json"}
        try:
            if self.http_client is not None:
                return await self.http_client.get(
                    self.base_url, headers=headers, timeout=self.timeout
                )
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.get(self.base_url, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"error contacting iss api: {e}") from e

    @staticmethod
    def _parse_response(response: httpx.Response) -> Position:
        try:
            payload = ISSNowResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ParseError(f"decoding iss api response: {e}") from e

        latitude = _to_float("latitude", payload.iss_position.latitude)
        longitude = _to_float("longitude", payload.iss_position.longitude)
        return Position(latitude=latitude, longitude=longitude)


def _to_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        raise ParseError(f"converting {name} {value!r} to float: {e}") from e
