"""
FastAPI dependency injection providers.

Upstream clients and the status service are built per request from the
application settings, so tests can substitute any of them through
``app.dependency_overrides``.
"""

from typing import Optional

import httpx
from fastapi import Depends, Request

from spacewatch.config import Settings
from spacewatch.services.iss_client import ISSClient
from spacewatch.services.status_service import StatusService
from spacewatch.services.weather_client import WeatherbitClient


def get_app_settings(request: Request) -> Settings:
    """
    Provide the settings the application was created with.
    """
    return request.app.state.settings


def get_http_client(request: Request) -> Optional[httpx.AsyncClient]:
    """
    Provide the shared outbound HTTP client opened in the lifespan.

    Returns None when the application runs without its lifespan, in which
    case each upstream client opens its own connection per call.
    """
    return getattr(request.app.state, "http_client", None)


def get_iss_client(
    settings: Settings = Depends(get_app_settings),
    http_client: Optional[httpx.AsyncClient] = Depends(get_http_client),
) -> ISSClient:
    return ISSClient(
        base_url=settings.iss_api_url,
        timeout=settings.upstream_timeout,
        http_client=http_client,
    )


def get_weather_client(
    settings: Settings = Depends(get_app_settings),
    http_client: Optional[httpx.AsyncClient] = Depends(get_http_client),
) -> WeatherbitClient:
    return WeatherbitClient(
        base_url=settings.weather_api_url,
        timeout=settings.upstream_timeout,
        http_client=http_client,
    )


def get_status_service(
    iss_client: ISSClient = Depends(get_iss_client),
    weather_client: WeatherbitClient = Depends(get_weather_client),
) -> StatusService:
    """
    Provide the status service wired to both upstream clients.
    """
    return StatusService(position_provider=iss_client, weather_provider=weather_client)
