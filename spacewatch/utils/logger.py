import logging
import sys

from pythonjsonlogger import jsonlogger

from spacewatch.config import get_settings

settings = get_settings()

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger writing one JSON object per line to stdout.

    Every record carries the service name and version so lines from
    several deployments can be told apart once aggregated.

    Args:
        name: The name of the logger (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            fmt=LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            rename_fields={"levelname": "level"},
            static_fields={"service": settings.app_name, "version": settings.app_version},
        )
    )

    logger.addHandler(handler)
    logger.propagate = False

    return logger
