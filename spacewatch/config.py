"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import Optional, List, Sequence

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

CLI_PROG_NAME = "spacewatch-api"

# uvicorn has no write timeout; the setting is accepted and reported as ignored.
DEFAULT_WRITE_TIMEOUT = 5.0


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SPACEWATCH_",
        populate_by_name=True,
        extra="ignore",
    )

    # Application settings
    app_name: str = "Spacewatch API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Web server settings
    web_host: str = "localhost"
    web_port: int = 9000
    web_read_timeout: float = 5.0
    web_write_timeout: float = DEFAULT_WRITE_TIMEOUT
    web_shutdown_timeout: float = 5.0

    # Upstream API settings
    iss_api_url: str = "http://api.open-notify.org/iss-now.json"
    weather_api_url: str = "https://api.weatherbit.io"
    upstream_timeout: float = 10.0
    weather_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("SPACEWATCH_WEATHER_API_KEY", "WEATHERBIT_KEY"),
    )

    # Deadline for the whole status lookup, disabled when unset
    status_deadline: Optional[float] = None

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_methods: List[str] = ["GET"]
    cors_allow_headers: List[str] = ["*"]


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()


def load_settings(args: Optional[Sequence[str]] = None) -> Settings:
    """
    Build settings from the environment, `.env` and command-line flags.

    Flags take precedence over environment variables, and `--help` prints
    the usage of every setting and exits.

    Args:
        args: Command-line arguments; `sys.argv[1:]` when omitted
    """
    return Settings(
        _cli_parse_args=list(args) if args is not None else True,
        _cli_prog_name=CLI_PROG_NAME,
    )
