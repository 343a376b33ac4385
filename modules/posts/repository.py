"""
Post repository for database access.

Encapsulates Supabase queries for the ``posts`` and ``reports`` tables.
Reactions, comments and media are ``jsonb`` columns written whole.
"""

from typing import Optional, Any

from shared.pagination import PageCursor
from shared.repository import BaseRepository, utc_now_iso
from .models import Comment, Post, PostVisibility, Reaction, Report, ReportStatus


class PostRepository(BaseRepository[Post]):
    """
    Repository for post data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for ownership and visibility.
    """

    table_name = "posts"

    def create(self, data: dict[str, Any]) -> Post:
        now = utc_now_iso()
        payload = {"created_at": now, "updated_at": now, **data}
        result = self._db.table(self.table_name).insert(payload).execute()
        return self._map_to_post(result.data[0])

    def get_by_id(self, post_id: str) -> Optional[Post]:
        row = self._get_row(post_id)
        if row is None:
            return None
        return self._map_to_post(row)

    def update(self, post_id: str, data: dict[str, Any]) -> Optional[Post]:
        payload = {**data, "updated_at": utc_now_iso()}
        result = self._db.table(self.table_name).update(payload).eq("id", post_id).execute()
        if not result.data:
            return None
        return self._map_to_post(result.data[0])

    def delete(self, post_id: str) -> None:
        self._db.table(self.table_name).delete().eq("id", post_id).execute()

    def save_reactions(self, post_id: str, reactions: list[Reaction]) -> Optional[Post]:
        return self.update(
            post_id, {"reactions": [r.model_dump(mode="json") for r in reactions]}
        )

    def save_comments(self, post_id: str, comments: list[Comment]) -> Optional[Post]:
        return self.update(
            post_id, {"comments": [c.model_dump(mode="json") for c in comments]}
        )

    def increment_shares(self, post_id: str) -> int:
        """Atomically bump the share counter and return the new value."""
        result = self._db.rpc("increment_post_shares", {"p_post_id": post_id}).execute()
        return int(result.data or 0)

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    def list_by_author(
        self,
        author_id: str,
        limit: Optional[int] = None,
        after: Optional[PageCursor] = None,
        visibilities: Optional[list[PostVisibility]] = None,
    ) -> list[Post]:
        """Author's posts newest first, optionally restricted and paged."""
        query = self._db.table(self.table_name).select("*").eq("author_id", author_id)
        if visibilities is not None:
            query = query.in_("visibility", [v.value for v in visibilities])
        query = self._newest_first(query, after)
        if limit:
            query = query.limit(limit)
        result = query.execute()
        return [self._map_to_post(row) for row in result.data]

    def fetch_scope(
        self,
        limit: int,
        author_id: Optional[str] = None,
        visibility: Optional[PostVisibility] = None,
        author_ids: Optional[list[str]] = None,
    ) -> list[Post]:
        """
        One feed scope: posts matching every given filter, newest first.

        Args:
            limit: Maximum rows
            author_id: Single author filter
            visibility: Visibility filter
            author_ids: Author membership filter
        """
        query = self._db.table(self.table_name).select("*")
        if author_id is not None:
            query = query.eq("author_id", author_id)
        if visibility is not None:
            query = query.eq("visibility", visibility.value)
        if author_ids is not None:
            query = query.in_("author_id", author_ids)
        result = query.order("created_at", desc=True).limit(limit).execute()
        return [self._map_to_post(row) for row in result.data]

    def _map_to_post(self, data: dict[str, Any]) -> Post:
        """Map database row to Post model, defaulting missing columns."""
        cleaned = {k: v for k, v in data.items() if v is not None}
        cleaned["id"] = str(data["id"])
        cleaned["author_id"] = str(data["author_id"])
        return Post.model_validate(cleaned)


class ReportRepository(BaseRepository[Report]):
    """Repository for post reports."""

    table_name = "reports"

    def create(self, reporter_id: str, post_id: str, reason: str) -> Report:
        result = self._db.table(self.table_name).insert({
            "reporter_id": reporter_id,
            "post_id": post_id,
            "reason": reason,
            "status": ReportStatus.PENDING.value,
            "created_at": utc_now_iso(),
        }).execute()
        return self._map_to_report(result.data[0])

    def get_by_id(self, report_id: str) -> Optional[Report]:
        row = self._get_row(report_id)
        if row is None:
            return None
        return self._map_to_report(row)

    def list_page(self, page_size: int, after: Optional[PageCursor] = None) -> list[Report]:
        """Newest-first page; fetches one extra row for has_more."""
        query = self._newest_first(self._db.table(self.table_name).select("*"), after)
        result = query.limit(page_size + 1).execute()
        return [self._map_to_report(row) for row in result.data]

    def set_status(self, report_id: str, status: ReportStatus) -> Optional[Report]:
        result = self._db.table(self.table_name).update({
            "status": status.value,
            "resolved_at": utc_now_iso(),
        }).eq("id", report_id).execute()
        if not result.data:
            return None
        return self._map_to_report(result.data[0])

    def count_by_status(self, status: ReportStatus) -> int:
        result = (
            self._db.table(self.table_name)
            .select("id", count="exact")
            .eq("status", status.value)
            .execute()
        )
        return result.count or 0

    def _map_to_report(self, data: dict[str, Any]) -> Report:
        return Report(
            id=str(data["id"]),
            reporter_id=str(data["reporter_id"]),
            post_id=str(data["post_id"]),
            reason=data.get("reason") or "",
            status=ReportStatus(data.get("status") or ReportStatus.PENDING.value),
            created_at=data["created_at"],
            resolved_at=data.get("resolved_at"),
        )
