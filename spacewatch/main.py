from contextlib import asynccontextmanager
from typing import Optional, Sequence

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from spacewatch.api import routes
from spacewatch.config import DEFAULT_WRITE_TIMEOUT, Settings, get_settings, load_settings
from spacewatch.middleware.request_tracker import RequestTrackerMiddleware
from spacewatch.utils.logger import setup_logger

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "Starting Spacewatch API...",
        extra={"config": settings.model_dump(mode="json")},
    )

    app.state.http_client = httpx.AsyncClient(timeout=settings.upstream_timeout)

    yield

    logger.info("Shutting down Spacewatch API...")

    await app.state.http_client.aclose()
    del app.state.http_client


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_middleware(RequestTrackerMiddleware)

    Instrumentator().instrument(app).expose(app, endpoint="/prometheus-metrics")

    app.include_router(routes.router)

    return app


app = create_app()


def run(args: Optional[Sequence[str]] = None) -> None:
    settings = load_settings(args)

    if settings.web_write_timeout != DEFAULT_WRITE_TIMEOUT:
        logger.warning(
            "web_write_timeout is not supported by uvicorn and is ignored",
            extra={"web_write_timeout": settings.web_write_timeout},
        )

    uvicorn.run(
        create_app(settings),
        host=settings.web_host,
        port=settings.web_port,
        timeout_keep_alive=int(settings.web_read_timeout),
        timeout_graceful_shutdown=int(settings.web_shutdown_timeout),
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
