"""
Base exception classes for the Mediashare backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to an HTTP status code.
"""

from typing import Optional, Any


class MediashareError(Exception):
    """
    Base exception for all Mediashare errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(MediashareError):
    """Resource not found."""

    pass


class ValidationError(MediashareError):
    """Input validation failed."""

    pass


class InvalidInputError(ValidationError):
    """Raised when a request is missing data or carries malformed fields."""

    def __init__(self, message: str = "Invalid input", details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="INVALID_INPUT", details=details)


class AuthenticationError(MediashareError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(MediashareError):
    """Authorization failed (insufficient permissions)."""

    pass
