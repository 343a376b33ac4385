"""
Supabase client factory.

The API enforces ownership and visibility rules itself, so every
repository shares one service-role client (row level security is
bypassed).
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get the shared service-role Supabase client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )
        logger.info(f"Connected Supabase client to {settings.supabase_url}")

    return _service_client


def is_database_reachable() -> bool:
    """Run a one-row query against ``profiles``; False on any failure."""
    try:
        get_supabase_client().table("profiles").select("id").limit(1).execute()
    except Exception as e:
        logger.warning(f"Database check failed: {e}")
        return False
    return True


def reset_client_cache() -> None:
    """Drop the cached client so the next call reconnects."""
    global _service_client
    _service_client = None
