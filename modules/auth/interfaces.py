"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Args:
            token: JWT access token from Supabase Auth

        Returns:
            AuthenticatedUser with user ID and basic info

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        ...

    async def is_email_verified(self, user_id: str) -> bool:
        """
        Check the auth provider for the user's email confirmation.

        Args:
            user_id: Supabase user ID (UUID)

        Returns:
            True once the user has confirmed their email address
        """
        ...

    async def delete_auth_user(self, user_id: str) -> None:
        """
        Delete the user's auth account. Irreversible.

        Args:
            user_id: Supabase user ID (UUID)
        """
        ...
