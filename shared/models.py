"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from JWT claims and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: str = Field(..., description="User's email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")

    created_at: Optional[datetime] = Field(None, description="Account creation time")
    last_sign_in: Optional[datetime] = Field(None, description="Last sign-in time")

    role: str = Field(default="user", description="Auth role from the token")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class Page(BaseModel):
    """Cursor pagination envelope fields shared by list responses."""

    next_cursor: Optional[str] = Field(None, description="Opaque cursor for the next page")
    has_more: bool = Field(default=False, description="Whether more items exist")
