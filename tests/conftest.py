"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Any
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.service import reset_auth_service
from modules.posts.models import Post
from modules.profiles.models import Profile
from shared.models import AuthenticatedUser


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def make_profile(user_id: str = "test-user-123", **fields: Any) -> Profile:
    """Build a profile with sensible defaults."""
    data = {"email": f"{user_id}@example.com", "display_name": user_id.title()}
    data.update(fields)
    return Profile(id=user_id, **data)


def make_post(post_id: str, author_id: str = "test-user-123", minutes: int = 0, **fields: Any) -> Post:
    """Build a post created ``minutes`` after BASE_TIME."""
    created = BASE_TIME + timedelta(minutes=minutes)
    data = {"content": f"post {post_id}", "created_at": created, "updated_at": created}
    data.update(fields)
    return Post(id=post_id, author_id=author_id, **data)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the auth singleton and the service container around each test."""
    reset_auth_service()
    reset_container()
    yield
    reset_auth_service()
    reset_container()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def current_user(test_user_id: str, test_user_email: str) -> AuthenticatedUser:
    """The user that route tests authenticate as."""
    return AuthenticatedUser(id=test_user_id, email=test_user_email, email_verified=True)


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
