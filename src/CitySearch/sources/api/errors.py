"""Errors raised by the city search API layer."""

from __future__ import annotations


class ApiError(RuntimeError):
    """Base class for failures talking to the city search service."""


class ApiTransportError(ApiError):
    """Connection failure, HTTP timeout or non-success HTTP status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiResponseError(ApiError, ValueError):
    """Response payload does not match the expected shape."""
