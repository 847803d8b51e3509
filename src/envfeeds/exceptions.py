"""Custom exceptions for the environmental feed clients."""

from __future__ import annotations


class EnvFeedsError(Exception):
    """Base exception for all feed client errors."""


class EnvFeedsConnectionError(EnvFeedsError):
    """Raised when the client cannot connect to the upstream API."""


class EnvFeedsTimeoutError(EnvFeedsError):
    """Raised when a request to the upstream API times out."""


class EnvFeedsAPIError(EnvFeedsError):
    """Raised when the API returns an error response.

    WAQI reports errors with HTTP 200 and ``{"status": "error"}``; those are
    raised with the HTTP status the server actually sent.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class EnvFeedsValidationError(EnvFeedsError):
    """Raised when API response data fails model validation."""
