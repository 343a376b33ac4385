"""
Base exception classes for the SportFwd backend.

Each module defines its own exceptions that inherit from these bases.
The API layer maps each base kind to an HTTP status, so errors are
classified by type rather than by inspecting message text.
"""

from typing import Optional, Any


class SportFwdError(Exception):
    """
    Base exception for all SportFwd errors.

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


class NotFoundError(SportFwdError):
    """Resource not found."""

    pass


class ValidationError(SportFwdError):
    """Input validation failed."""

    pass


class AuthenticationError(SportFwdError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(SportFwdError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConflictError(SportFwdError):
    """Request conflicts with the current state of a resource."""

    pass


class ExternalServiceError(SportFwdError):
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
