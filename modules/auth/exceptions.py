"""
Authentication module exceptions.

These exceptions are raised by the auth module and mapped to 401
responses by the API error handlers.
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when the server has no JWT secret configured."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="AUTH_NOT_CONFIGURED",
        )

