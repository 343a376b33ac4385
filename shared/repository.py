"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import TypeVar, Generic, Any, Optional
from supabase import Client

from .pagination import PageCursor


T = TypeVar("T")


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string for timestamp columns."""
    return datetime.now(timezone.utc).isoformat()


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class PostRepository(BaseRepository[Post]):
            def get_by_id(self, post_id: str) -> Optional[Post]:
                result = self._db.table("posts").select("*").eq("id", post_id).execute()
                if not result.data:
                    return None
                return self._map_to_post(result.data[0])
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _get_row(self, row_id: str) -> Optional[dict[str, Any]]:
        """Fetch a single row of this repository's table by primary key."""
        result = self._db.table(self.table_name).select("*").eq("id", row_id).execute()
        if not result.data:
            return None
        return result.data[0]

    def _newest_first(self, query: Any, after: Optional[PageCursor] = None) -> Any:
        """Order a query newest first and start it after ``after`` when given."""
        if after is not None:
            query = query.or_(after.after_filter())
        return query.order("created_at", desc=True).order("id", desc=True)
