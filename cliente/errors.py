"""
Error handling infrastructure for the inventory API client.

Defines the normalized error hierarchy raised by the request helper.
Every error carries a human readable message and an ErrorType
classification.
"""

from enum import Enum
from typing import Optional


class ErrorType(Enum):
    """Error classification for a failed request."""
    TIMEOUT = "TIMEOUT"                    # No response within the deadline
    NETWORK = "NETWORK"                    # Transport level failure
    HTTP = "HTTP"                          # Non-success status code
    NOT_FOUND = "NOT_FOUND"                # 404 on a single resource
    VALIDATION = "VALIDATION"              # 400 rejected by the server
    INVALID_RESPONSE = "INVALID_RESPONSE"  # JSON content-type with a broken body


class InventarioError(Exception):
    """Base exception for all inventory client errors."""

    error_type: ErrorType = ErrorType.HTTP

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.error_type.value
        self.status_code = status_code


class RequestTimeoutError(InventarioError):
    """The request exceeded the configured deadline."""
    error_type = ErrorType.TIMEOUT


class NetworkError(InventarioError):
    """
    Transport failure before any response arrived.

    Examples:
    - Connection refused
    - DNS resolution failure
    - Connection reset
    """
    error_type = ErrorType.NETWORK


class HTTPRequestError(InventarioError):
    """The server answered with a non-success status code."""
    error_type = ErrorType.HTTP

    def __init__(
        self,
        message: str,
        status_code: int,
        payload=None,
        error_code: Optional[str] = None
    ):
        super().__init__(message, error_code=error_code, status_code=status_code)
        self.payload = payload


class NotFoundError(HTTPRequestError):
    """The requested resource does not exist (404)."""
    error_type = ErrorType.NOT_FOUND


class ValidationError(HTTPRequestError):
    """The server rejected the payload (400)."""
    error_type = ErrorType.VALIDATION


class InvalidResponseError(InventarioError):
    """The response declared JSON but the body could not be decoded."""
    error_type = ErrorType.INVALID_RESPONSE
