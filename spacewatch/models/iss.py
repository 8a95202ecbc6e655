from pydantic import BaseModel, Field


class ISSPositionPayload(BaseModel):
    latitude: str = Field(..., description="Latitude encoded as a string")
    longitude: str = Field(..., description="Longitude encoded as a string")


class ISSNowResponse(BaseModel):
    """Body returned by the open-notify `iss-now.json` endpoint."""

    timestamp: int = Field(0, description="Unix timestamp of the reading")
    message: str = Field("", description="Upstream status message")
    iss_position: ISSPositionPayload = Field(..., description="Current position of the station")


class Position(BaseModel):
    """Geographical coordinates of the International Space Station."""

    latitude: float
    longitude: float
