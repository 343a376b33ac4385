"""
Authentication module data models.
"""

from typing import Optional
from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    This matches the structure of Supabase Auth JWTs.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: Optional[str] = Field(None, description="User's email")
    email_confirmed_at: Optional[str] = Field(None, description="Email confirmation time")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")
    role: str = Field(default="authenticated", description="User role")

    # Supabase-specific claims
    app_metadata: dict = Field(default_factory=dict)
    user_metadata: dict = Field(default_factory=dict)


__all__ = ["JWTPayload", "AuthenticatedUser"]
