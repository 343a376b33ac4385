"""
Messaging repositories for the ``conversations`` and ``messages`` tables.
"""

from typing import Optional, Any

from shared.repository import BaseRepository, utc_now_iso
from .models import Conversation, Message


class ConversationRepository(BaseRepository[Conversation]):
    table_name = "conversations"

    def create(self, participants: list[str], last_message: str = "") -> Conversation:
        now = utc_now_iso()
        result = self._db.table(self.table_name).insert({
            "participants": participants,
            "last_message": last_message,
            "last_message_time": now,
            "created_at": now,
            "updated_at": now,
        }).execute()
        return self._map_to_conversation(result.data[0])

    def get_by_id(self, conversation_id: str) -> Optional[Conversation]:
        row = self._get_row(conversation_id)
        if row is None:
            return None
        return self._map_to_conversation(row)

    def find_between(self, user_a: str, user_b: str) -> Optional[Conversation]:
        result = (
            self._db.table(self.table_name)
            .select("*")
            .contains("participants", [user_a])
            .contains("participants", [user_b])
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_conversation(result.data[0])

    def list_for_user(self, user_id: str) -> list[Conversation]:
        """Conversations the user takes part in, most recent activity first."""
        result = (
            self._db.table(self.table_name)
            .select("*")
            .contains("participants", [user_id])
            .order("last_message_time", desc=True)
            .execute()
        )
        return [self._map_to_conversation(row) for row in result.data]

    def update_last_message(self, conversation_id: str, content: str) -> None:
        now = utc_now_iso()
        self._db.table(self.table_name).update({
            "last_message": content,
            "last_message_time": now,
            "updated_at": now,
        }).eq("id", conversation_id).execute()

    def _map_to_conversation(self, data: dict[str, Any]) -> Conversation:
        return Conversation(
            id=str(data["id"]),
            participants=[str(p) for p in (data.get("participants") or [])],
            last_message=data.get("last_message") or "",
            last_message_time=data.get("last_message_time"),
            created_at=data["created_at"],
            updated_at=data.get("updated_at") or data["created_at"],
        )


class MessageRepository(BaseRepository[Message]):
    table_name = "messages"

    def create(
        self,
        conversation_id: str,
        sender_id: str,
        receiver_id: str,
        content: str,
    ) -> Message:
        result = self._db.table(self.table_name).insert({
            "conversation_id": conversation_id,
            "sender_id": sender_id,
            "receiver_id": receiver_id,
            "content": content,
            "read": False,
            "created_at": utc_now_iso(),
        }).execute()
        return self._map_to_message(result.data[0])

    def list_for_conversation(
        self,
        conversation_id: str,
        since: Optional[str] = None,
    ) -> list[Message]:
        """
        Messages oldest first.

        Args:
            since: Only messages created at or after this ISO timestamp
        """
        query = self._db.table(self.table_name).select("*").eq("conversation_id", conversation_id)
        if since:
            query = query.gte("created_at", since)
        result = query.order("created_at").execute()
        return [self._map_to_message(row) for row in result.data]

    def mark_read(self, conversation_id: str, receiver_id: str) -> None:
        self._db.table(self.table_name).update({"read": True}).eq(
            "conversation_id", conversation_id
        ).eq("receiver_id", receiver_id).eq("read", False).execute()

    def count_unread(self, receiver_id: str) -> int:
        result = (
            self._db.table(self.table_name)
            .select("id", count="exact")
            .eq("receiver_id", receiver_id)
            .eq("read", False)
            .execute()
        )
        return result.count or 0

    def _map_to_message(self, data: dict[str, Any]) -> Message:
        return Message(
            id=str(data["id"]),
            conversation_id=str(data["conversation_id"]),
            sender_id=str(data["sender_id"]),
            receiver_id=str(data["receiver_id"]),
            content=data.get("content") or "",
            read=bool(data.get("read", False)),
            created_at=data["created_at"],
        )
