"""
Verification request repository for the ``verification_requests`` table.

Documents are stored as a ``jsonb`` list on the request row.
"""

from typing import Optional, Any

from shared.repository import BaseRepository, utc_now_iso
from .models import ReviewStatus, VerificationDocument, VerificationRequest


class VerificationRepository(BaseRepository[VerificationRequest]):
    """
    Repository for verification requests.

    Note: This repository does NOT perform authorization checks.
    """

    table_name = "verification_requests"

    def create(self, data: dict[str, Any]) -> VerificationRequest:
        now = utc_now_iso()
        payload = {"submitted_at": now, "updated_at": now, **data}
        result = self._db.table(self.table_name).insert(payload).execute()
        return self._map_to_request(result.data[0])

    def get_by_id(self, request_id: str) -> Optional[VerificationRequest]:
        row = self._get_row(request_id)
        if row is None:
            return None
        return self._map_to_request(row)

    def list_for_user(self, user_id: str) -> list[VerificationRequest]:
        """A user's requests, newest first."""
        result = (
            self._db.table(self.table_name)
            .select("*")
            .eq("user_id", user_id)
            .order("submitted_at", desc=True)
            .execute()
        )
        return [self._map_to_request(row) for row in result.data]

    def list_by_status(
        self,
        status: ReviewStatus,
        limit: Optional[int] = None,
    ) -> list[VerificationRequest]:
        """Requests with a status, oldest submission first."""
        query = (
            self._db.table(self.table_name)
            .select("*")
            .eq("status", status.value)
            .order("submitted_at")
        )
        if limit:
            query = query.limit(limit)
        result = query.execute()
        return [self._map_to_request(row) for row in result.data]

    def count_by_status(self, status: ReviewStatus) -> int:
        result = (
            self._db.table(self.table_name)
            .select("id", count="exact")
            .eq("status", status.value)
            .execute()
        )
        return result.count or 0

    def save_review(
        self,
        request_id: str,
        status: ReviewStatus,
        reviewed_by: str,
        notes: Optional[str],
        documents: list[VerificationDocument],
    ) -> Optional[VerificationRequest]:
        now = utc_now_iso()
        result = self._db.table(self.table_name).update({
            "status": status.value,
            "reviewed_by": reviewed_by,
            "reviewed_at": now,
            "review_notes": notes,
            "documents": [d.model_dump(mode="json") for d in documents],
            "updated_at": now,
        }).eq("id", request_id).execute()
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def _map_to_request(self, data: dict[str, Any]) -> VerificationRequest:
        """Map database row to VerificationRequest model."""
        cleaned = {k: v for k, v in data.items() if v is not None}
        cleaned["id"] = str(data["id"])
        cleaned["user_id"] = str(data["user_id"])
        return VerificationRequest.model_validate(cleaned)
