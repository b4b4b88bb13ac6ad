"""Custom exceptions for Weather Lambda with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error logging and responses."""

    # Generic errors
    WEATHER_LAMBDA_ERROR = "WEATHER_LAMBDA_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Upstream weather provider errors
    WEATHER_ERROR = "WEATHER_ERROR"
    WEATHER_API_ERROR = "WEATHER_API_ERROR"

    # Durable store errors
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"

    # Response encoding errors
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_MISSING = "CONFIG_MISSING"


class WeatherLambdaException(Exception):
    """Base exception for Weather Lambda errors with HTTP status code support.

    Components raise subclasses of this; only the request handler decides
    which status code the caller sees.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_LAMBDA_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationException(WeatherLambdaException):
    """Invalid or missing request input."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details=details,
        )


class WeatherException(WeatherLambdaException):
    """Weather provider errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class WeatherAPIException(WeatherException):
    """Weather provider answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_API_ERROR,
            status_code=status_code,
            details=details,
        )


class PersistenceException(WeatherLambdaException):
    """Durable store write failed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.PERSISTENCE_ERROR,
            status_code=500,
            details=details,
        )


class SerializationException(WeatherLambdaException):
    """Response body could not be encoded."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SERIALIZATION_ERROR,
            status_code=500,
            details=details,
        )


class ConfigurationException(WeatherLambdaException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
