"""
JWT Authentication dependencies.

Token validation is delegated to the auth module; this file only adapts
its errors to HTTP responses.
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService
from modules.profiles.interfaces import IProfileService

from ..dependencies import get_auth_service, get_profile_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise AuthError("Missing authorization header")

    try:
        return await auth.validate_token(credentials.credentials)
    except AuthenticationError as e:
        raise AuthError(e.message)


async def require_admin(
    user: AuthenticatedUser = Depends(get_current_user),
    profiles: IProfileService = Depends(get_profile_service),
) -> AuthenticatedUser:
    """
    Dependency that requires an admin profile.

    Admin rights live on the profile record, not in the token.
    """
    profile = await profiles.get_profile(user.id)
    if profile is None or not profile.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user

