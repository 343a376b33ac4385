"""
Notification repository for the ``notifications`` table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository, utc_now_iso
from .models import Notification, NotificationType, RequestStatus


class NotificationRepository(BaseRepository[Notification]):
    """Data access for notifications and connection requests."""

    table_name = "notifications"

    def create(self, data: dict[str, Any]) -> Notification:
        payload = {"read": False, "created_at": utc_now_iso(), **data}
        result = self._db.table(self.table_name).insert(payload).execute()
        return self._map_to_notification(result.data[0])

    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        row = self._get_row(notification_id)
        if row is None:
            return None
        return self._map_to_notification(row)

    def list_for_user(self, user_id: str, limit: Optional[int] = None) -> list[Notification]:
        """Notifications for a recipient, newest first."""
        query = (
            self._db.table(self.table_name)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
        )
        if limit:
            query = query.limit(limit)
        result = query.execute()
        return [self._map_to_notification(row) for row in result.data]

    def mark_read(self, notification_id: str) -> None:
        self._db.table(self.table_name).update({"read": True}).eq(
            "id", notification_id
        ).execute()

    def mark_all_read(self, user_id: str) -> None:
        self._db.table(self.table_name).update({"read": True}).eq(
            "user_id", user_id
        ).eq("read", False).execute()

    def count_unread(self, user_id: str) -> int:
        result = (
            self._db.table(self.table_name)
            .select("id", count="exact")
            .eq("user_id", user_id)
            .eq("read", False)
            .execute()
        )
        return result.count or 0

    def delete_for_user(self, user_id: str) -> None:
        """Delete notifications received or sent by a user."""
        self._db.table(self.table_name).delete().eq("user_id", user_id).execute()
        self._db.table(self.table_name).delete().eq("sender_id", user_id).execute()

    # -------------------------------------------------------------------------
    # Connection requests
    # -------------------------------------------------------------------------

    def find_connection_requests(
        self,
        sender_id: Optional[str] = None,
        receiver_id: Optional[str] = None,
        status: Optional[RequestStatus] = None,
    ) -> list[Notification]:
        query = (
            self._db.table(self.table_name)
            .select("*")
            .eq("type", NotificationType.CONNECTION_REQUEST.value)
        )
        if sender_id:
            query = query.eq("sender_id", sender_id)
        if receiver_id:
            query = query.eq("user_id", receiver_id)
        if status:
            query = query.eq("status", status.value)
        result = query.order("created_at", desc=True).execute()
        return [self._map_to_notification(row) for row in result.data]

    def update_status(self, notification_id: str, status: RequestStatus) -> None:
        self._db.table(self.table_name).update(
            {"status": status.value, "read": True, "updated_at": utc_now_iso()}
        ).eq("id", notification_id).execute()

    def _map_to_notification(self, data: dict[str, Any]) -> Notification:
        """Map database row to Notification model."""
        return Notification(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            type=NotificationType(data["type"]),
            title=data.get("title") or "",
            content=data.get("content") or "",
            read=bool(data.get("read", False)),
            sender_id=data.get("sender_id"),
            post_id=data.get("post_id"),
            comment_id=data.get("comment_id"),
            message_id=data.get("message_id"),
            status=RequestStatus(data["status"]) if data.get("status") else None,
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
        )
