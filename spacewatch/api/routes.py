"""
This module defines the routes of the spacewatch API.
"""

from datetime import datetime, UTC

from fastapi import APIRouter, Depends, Request, Response
from pydantic_core import PydanticSerializationError

from spacewatch.config import Settings
from spacewatch.exceptions import EncodingError
from spacewatch.models.responses import HealthResponse
from spacewatch.models.status import Status
from spacewatch.services.status_service import StatusService
from spacewatch.utils.dependencies import get_app_settings, get_status_service
from spacewatch.utils.logger import setup_logger

logger = setup_logger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

router = APIRouter(tags=["status"])


def encode_status(status: Status) -> bytes:
    try:
        return status.model_dump_json(by_alias=True).encode("utf-8")
    except PydanticSerializationError as e:
        raise EncodingError(f"marshalling status report: {e}") from e


@router.get(
    "/",
    response_class=Response,
    responses={200: {"model": Status, "content": {"application/json": {}}}},
)
async def get_iss_status(
    request: Request,
    status_service: StatusService = Depends(get_status_service),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """
    Report the ISS position, the weather under it and whether it is visible.

    Failures of either upstream service are logged and answered with a bare 500.
    """
    request_id = getattr(request.state, "request_id", None)

    try:
        status = await status_service.get_status(
            settings.weather_api_key.get_secret_value(),
            deadline=settings.status_deadline,
        )
    except Exception as e:
        logger.error(
            "error: getting weather report",
            extra={
                "event": "status_error",
                "error": str(e),
                "error_type": type(e).__name__,
                "request_id": request_id,
            },
        )
        return Response(status_code=500)

    try:
        body = encode_status(status)
    except EncodingError as e:
        logger.error(
            "error: marshalling weather report",
            extra={
                "event": "encoding_error",
                "error": str(e),
                "error_type": type(e).__name__,
                "request_id": request_id,
            },
        )
        return Response(status_code=500)

    return Response(content=body, status_code=200, media_type=JSON_CONTENT_TYPE)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Health check endpoint; does not contact the upstream services.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
    )
