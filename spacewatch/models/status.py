from pydantic import BaseModel, Field


class Status(BaseModel):
    """ISS status report returned by the status endpoint."""

    latitude: float = Field(..., serialization_alias="lat")
    longitude: float = Field(..., serialization_alias="long")
    timezone: str
    cloud_coverage: int
    day_part: str = Field("", description="'day', 'night' or empty for unknown codes")

    # Derived from cloud coverage and part of the day.
    is_visible: bool
