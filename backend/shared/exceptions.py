"""
Base exception classes for the BlueTask backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to an HTTP status code (see api/errors.py).
"""

from typing import Optional, Any


class BlueTaskError(Exception):
    """
    Base exception for all BlueTask errors.

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


class NotFoundError(BlueTaskError):
    """Resource not found."""

    pass


class ValidationError(BlueTaskError):
    """Input validation failed."""

    pass


class AuthenticationError(BlueTaskError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(BlueTaskError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConflictError(BlueTaskError):
    """Request conflicts with the current state of a resource."""

    pass


class ExternalServiceError(BlueTaskError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
