"""Spacewatch service exceptions."""

from .common import (
    SpacewatchException,
    TransportError,
    UpstreamStatusError,
    ParseError,
    EmptyDataError,
    TimezoneError,
    EncodingError,
)

__all__ = [
    "SpacewatchException",
    "TransportError",
    "UpstreamStatusError",
    "ParseError",
    "EmptyDataError",
    "TimezoneError",
    "EncodingError",
]
