from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class WeatherbitObservation(BaseModel):
    """
    A single record from the weatherbit `current` endpoint.

    Only the fields the service reads are declared; everything else in the
    record is ignored.
    """

    lat: float = Field(..., description="Latitude of the observation")
    lon: float = Field(..., description="Longitude of the observation")
    timezone: str = Field(..., description="IANA timezone name")
    pod: str = Field(..., description="Part of the day, 'd' or 'n'")
    clouds: int = Field(..., description="Cloud coverage in percent")


class WeatherbitResponse(BaseModel):
    count: int = Field(0, description="Number of records reported")
    data: List[WeatherbitObservation] = Field(default_factory=list)


class WeatherCondition(BaseModel):
    """Weather at a location, as seen in the location's own timezone."""

    latitude: float
    longitude: float
    timezone: str
    local_time: datetime
    day_or_night: str = Field(..., description="Raw part-of-day code, 'd' or 'n'")
    cloud_coverage_percent: int = Field(..., ge=0, le=100)
