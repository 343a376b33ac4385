"""
Authentication module.

Handles JWT validation, auth-account administration and the session
state reducers used by the onboarding flow.

Public API:
- IAuthService: Interface for auth operations
- AuthenticatedUser: Minimal user info from JWT
- SessionState and its reducers
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthenticatedUser, JWTPayload
from .state import (
    SessionState,
    set_user,
    set_profile,
    set_loading,
    set_error,
    clear_user,
    update_email_verification,
    set_initializing,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthenticatedUser",
    "JWTPayload",
    # Session state
    "SessionState",
    "set_user",
    "set_profile",
    "set_loading",
    "set_error",
    "clear_user",
    "update_email_verification",
    "set_initializing",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
]
