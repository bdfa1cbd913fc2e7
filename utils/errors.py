"""Exceptions carrying an HTTP status for the API layer."""

from typing import Optional


class ServiceError(Exception):
    """Base error raised by services; rendered as an error response."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(ServiceError):
    """A required setting such as an API key is missing."""

    status_code = 500


class UpstreamError(ServiceError):
    """A third-party API call failed."""

    status_code = 502
