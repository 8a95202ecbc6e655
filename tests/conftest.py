"""
Common test fixtures and configuration.
"""

from typing import Callable

import httpx
import pytest

from spacewatch.models.iss import Position

from stubs import make_condition


@pytest.fixture
def iss_payload():
    """Body of a successful open-notify response."""
    return {
        "timestamp": 1638559834,
        "message": "success",
        "iss_position": {"latitude": "29.9314", "longitude": "11.3786"},
    }


@pytest.fixture
def weatherbit_payload():
    """Trimmed body of a successful weatherbit `current` response."""
    return {
        "count": 1,
        "data": [
            {
                "rh": 76,
                "pod": "d",
                "lon": -111.74,
                "pres": 1012.5,
                "timezone": "Pacific/Easter",
                "ob_time": "2021-12-04 23:00",
                "country_code": None,
                "clouds": 83,
                "ts": 1638658800,
                "city_name": None,
                "wind_spd": 6.1,
                "lat": -12.34,
                "weather": {"icon": "c04d", "code": 804, "description": "Overcast clouds"},
                "datetime": "2021-12-04:23",
                "temp": 23.9,
            }
        ],
    }


@pytest.fixture
def mock_http_client() -> Callable[..., httpx.AsyncClient]:
    """
    Build an ``httpx.AsyncClient`` whose requests are answered by a handler.

    The handler receives the ``httpx.Request`` and returns an ``httpx.Response``
    or raises an ``httpx`` exception.
    """

    def _build(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _build


@pytest.fixture
def vancouver_position():
    return Position(latitude=47.2, longitude=-131.29)


@pytest.fixture
def vancouver_condition():
    return make_condition()
