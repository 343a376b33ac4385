"""
User endpoints.

Exposes the identity carried by the caller's token.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.models import AuthenticatedUser
from ..middleware.auth import get_current_user

router = APIRouter()


class CurrentUserResponse(BaseModel):
    """Token identity response model."""

    id: str
    email: str
    email_verified: bool
    role: str


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_identity(
    user: AuthenticatedUser = Depends(get_current_user),
) -> CurrentUserResponse:
    """
    Get the identity of the authenticated caller.

    The full profile lives at /api/profiles/me.
    """
    return CurrentUserResponse(
        id=user.id,
        email=user.email,
        email_verified=user.email_verified,
        role=user.role,
    )
