"""
Services package initialization.
"""

from spacewatch.services.iss_client import ISSClient
from spacewatch.services.weather_client import WeatherbitClient
from spacewatch.services.status_service import (
    StatusService,
    PositionProvider,
    WeatherProvider,
)

__all__ = [
    "ISSClient",
    "WeatherbitClient",
    "StatusService",
    "PositionProvider",
    "WeatherProvider",
]
