"""Exception classes for ShepherdPress.

This module defines custom exception classes used throughout the application
for proper error handling and user feedback.
"""

from typing import Optional, Dict, Any


class ShepherdPressError(Exception):
    """Base exception class for all ShepherdPress errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(ShepherdPressError):
    """Exception raised for configuration-related errors."""
    pass


class ValidationError(ShepherdPressError):
    """Exception raised for data validation errors."""
    pass


class RegistrationError(ValidationError):
    """Exception raised when a customizer or content-type declaration is invalid."""
    pass


class SettingNotRegisteredError(ValidationError):
    """Exception raised when a setting key has no registered definition."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Setting '{key}' is not registered", details={"key": key})
        self.key = key


class ContentNotFoundError(ShepherdPressError):
    """Exception raised when a requested content record does not exist."""

    def __init__(self, kind: str, record_id: Any) -> None:
        super().__init__(
            f"{kind.capitalize()} '{record_id}' not found",
            details={"kind": kind, "id": record_id},
        )
        self.kind = kind
        self.record_id = record_id


class MaxRetriesExceededError(ShepherdPressError):
    """Exception raised when maximum retry attempts are exceeded."""

    def __init__(
        self,
        message: str,
        attempts: int,
        last_exception: Optional[Exception] = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            attempts: Number of attempts made
            last_exception: The last exception that caused the failure
        """
        super().__init__(message)
        self.attempts = attempts
        self.last_exception = last_exception


class APIError(ShepherdPressError):
    """Base exception for WordPress REST API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            response_data: Raw response data from API
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data or {}


class BadRequestError(APIError):
    """Exception raised for 400 Bad Request errors."""
    pass


class UnauthorizedError(APIError):
    """Exception raised for 401 Unauthorized errors."""
    pass


class ForbiddenError(APIError):
    """Exception raised for 403 Forbidden errors."""
    pass


class NotFoundError(APIError):
    """Exception raised for 404 Not Found errors."""
    pass


class ServerError(APIError):
    """Exception raised for 5xx server errors."""
    pass


class RateLimitError(APIError):
    """Exception raised for 429 Rate Limit errors."""

    def __init__(
        self,
        message: str,
        retry_after: Optional[int] = None,
        **kwargs: Any
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            retry_after: Seconds to wait before retrying
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


def format_error_for_user(error: Exception, debug: bool = False) -> str:
    """Format an error message for user display.

    Args:
        error: The exception to format
        debug: Whether to include debug information

    Returns:
        Formatted error message
    """
    if isinstance(error, SettingNotRegisteredError):
        return f"Unknown setting: {error.key}\nRun 'shepherdpress settings schema' to see registered settings"

    if isinstance(error, RateLimitError):
        message = f"Rate limit exceeded: {error.message}"
        if error.retry_after:
            message += f"\nRetry after: {error.retry_after} seconds"
        return message

    if isinstance(error, APIError):
        message = f"API error: {error.message}"
        if error.status_code:
            message += f"\nStatus code: {error.status_code}"
        if error.response_data and debug:
            message += f"\nResponse: {error.response_data}"
        return message

    if isinstance(error, MaxRetriesExceededError):
        message = f"{error.message} after {error.attempts} attempts"
        if error.last_exception:
            message += f"\nLast error: {error.last_exception}"
        return message

    if isinstance(error, ShepherdPressError):
        message = f"Error: {error.message}"
        if error.details and debug:
            message += f"\nDetails: {error.details}"
        return message

    if debug:
        return f"Error: {str(error)}\nType: {type(error).__name__}"
    return f"Error: {str(error)}"
