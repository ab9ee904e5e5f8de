"""
Error classifier for failed inventory requests.

Maps raw exceptions and HTTP status codes to ErrorType and builds the
normalized error raised by the request helper.
"""

import asyncio
import logging
from typing import Any, Optional

import httpx

from cliente.errors import (
    ErrorType,
    InventarioError,
    HTTPRequestError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ErrorClassifier:
    """
    Classifies exceptions and HTTP statuses.

    Classification Rules:
    - TIMEOUT: httpx timeouts and expired asyncio deadlines
    - NETWORK: any other httpx transport error
    - NOT_FOUND: 404 responses
    - VALIDATION: 400 and 422 responses
    - HTTP: any other non-success status
    """

    VALIDATION_STATUSES = {400, 422}

    # Server error bodies carry their text in this field
    MESSAGE_FIELD = "mensaje"

    def classify(self, exception: Exception) -> ErrorType:
        """
        Classify exception into error type.

        Args:
            exception: The exception to classify

        Returns:
            ErrorType enum value
        """
        if isinstance(exception, InventarioError):
            return exception.error_type

        if isinstance(exception, (httpx.TimeoutException, asyncio.TimeoutError)):
            return ErrorType.TIMEOUT

        if isinstance(exception, httpx.TransportError):
            return ErrorType.NETWORK

        if isinstance(exception, httpx.HTTPStatusError):
            return self.classify_status(exception.response.status_code)

        logger.debug(f"Unknown exception type {type(exception).__name__}, defaulting to NETWORK")
        return ErrorType.NETWORK

    def classify_status(self, status_code: int) -> ErrorType:
        """Classify a non-success HTTP status code."""
        if status_code == 404:
            return ErrorType.NOT_FOUND
        if status_code in self.VALIDATION_STATUSES:
            return ErrorType.VALIDATION
        return ErrorType.HTTP

    def error_message(self, status_code: int, payload: Any) -> str:
        """
        Message for a failed response.

        Uses the server supplied 'mensaje' field when present, otherwise
        a generic 'Error HTTP <status>'.
        """
        if isinstance(payload, dict):
            mensaje = payload.get(self.MESSAGE_FIELD)
            if mensaje:
                return str(mensaje)
        return f"Error HTTP {status_code}"

    def error_for_status(self, status_code: int, payload: Any = None) -> HTTPRequestError:
        """
        Build the normalized error for a failed response.

        Args:
            status_code: Response status code
            payload: Parsed JSON body, or None

        Returns:
            HTTPRequestError (or NotFoundError / ValidationError)
        """
        message = self.error_message(status_code, payload)
        error_type = self.classify_status(status_code)

        error_cls = {
            ErrorType.NOT_FOUND: NotFoundError,
            ErrorType.VALIDATION: ValidationError,
        }.get(error_type, HTTPRequestError)

        return error_cls(message, status_code=status_code, payload=payload)


_classifier: Optional[ErrorClassifier] = None


def get_error_classifier() -> ErrorClassifier:
    """Obtener instancia compartida del clasificador."""
    global _classifier
    if _classifier is None:
        _classifier = ErrorClassifier()
    return _classifier
