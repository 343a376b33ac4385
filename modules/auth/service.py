"""
Authentication service implementation.

Validates Supabase JWT tokens and talks to the Supabase Auth admin API.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional
import jwt
from supabase import Client

from shared.config import get_settings
from shared.database import get_supabase_client

from .interfaces import IAuthService
from .models import AuthenticatedUser, JWTPayload
from .exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses Supabase JWT tokens for authentication and the Supabase
    Auth admin API for account lookups and deletion.
    """

    def __init__(self, db: Optional[Client] = None):
        self._settings = get_settings()
        self._db_client = db

    @property
    def _db(self) -> Client:
        # Token validation needs no database; connect on first admin call
        if self._db_client is None:
            self._db_client = get_supabase_client()
        return self._db_client

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        This implementation validates Supabase JWTs using the JWT secret.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        jwt_payload = JWTPayload(**payload)

        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email or "",
            email_verified=jwt_payload.email_confirmed_at is not None,
            last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
            role=jwt_payload.role if jwt_payload.role != "authenticated" else "user",
        )

    async def is_email_verified(self, user_id: str) -> bool:
        """Look up email confirmation through the Auth admin API."""
        response = await asyncio.to_thread(self._db.auth.admin.get_user_by_id, user_id)
        user = getattr(response, "user", None)
        if user is None:
            return False
        return getattr(user, "email_confirmed_at", None) is not None

    async def delete_auth_user(self, user_id: str) -> None:
        """Delete the Supabase Auth account."""
        await asyncio.to_thread(self._db.auth.admin.delete_user, user_id)
        logger.info(f"Deleted auth account {user_id}")


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
