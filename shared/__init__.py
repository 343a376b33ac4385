"""
Shared infrastructure for the SportFwd backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository for Supabase tables
- concurrency: Task-group fan-out and id-keyed merging
- polling: Start/stop poller for streaming endpoints
- retry: Exponential-backoff retry for outbound gateway calls

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, is_database_reachable, reset_client_cache
from .exceptions import (
    SportFwdError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "is_database_reachable",
    "reset_client_cache",
    "SportFwdError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "ExternalServiceError",
    "AuthenticatedUser",
]
