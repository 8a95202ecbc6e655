from typing import Optional


class SpacewatchException(Exception):
    """Base exception for the spacewatch service."""
    def __init__(self, message: str):
        super().__init__(message)


class TransportError(SpacewatchException):
    """Raised when an upstream call cannot complete (network failure or timeout)."""


class UpstreamStatusError(SpacewatchException):
    """Raised when an upstream service answers with a non-200 status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ParseError(SpacewatchException):
    """Raised when an upstream payload is malformed."""


class EmptyDataError(SpacewatchException):
    """Raised when the weather upstream returns no data records."""


class TimezoneError(SpacewatchException):
    """Raised when a timezone name cannot be resolved."""


class EncodingError(SpacewatchException):
    """Raised when a status report cannot be serialized."""
