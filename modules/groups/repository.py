"""
Group repositories for the ``groups`` and ``group_messages`` tables.

``members`` and ``admins`` are ``text[]`` columns updated read-modify-write.
"""

import re
from typing import Optional, Any

from shared.repository import BaseRepository, utc_now_iso
from .models import Group, GroupMessage

# Characters with meaning inside a PostgREST or() filter
_FILTER_CHARS = re.compile(r"[,()%*\\]")


class GroupRepository(BaseRepository[Group]):
    table_name = "groups"

    def create(self, data: dict[str, Any]) -> Group:
        now = utc_now_iso()
        result = self._db.table(self.table_name).insert(
            {**data, "created_at": now, "updated_at": now}
        ).execute()
        return self._map_to_group(result.data[0])

    def get_by_id(self, group_id: str) -> Optional[Group]:
        row = self._get_row(group_id)
        if row is None:
            return None
        return self._map_to_group(row)

    def list_for_member(self, user_id: str) -> list[Group]:
        result = (
            self._db.table(self.table_name)
            .select("*")
            .contains("members", [user_id])
            .order("updated_at", desc=True)
            .execute()
        )
        return [self._map_to_group(row) for row in result.data]

    def list_by_sport(self, sport: str, limit: int = 50) -> list[Group]:
        result = (
            self._db.table(self.table_name)
            .select("*")
            .eq("sport", sport)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._map_to_group(row) for row in result.data]

    def search(self, term: str, limit: int = 20) -> list[Group]:
        """Case-insensitive substring match on name, description and sport."""
        cleaned = _FILTER_CHARS.sub("", term).strip()
        query = self._db.table(self.table_name).select("*")
        if cleaned:
            query = query.or_(
                f"name.ilike.%{cleaned}%,description.ilike.%{cleaned}%,sport.ilike.%{cleaned}%"
            )
        result = query.order("name").limit(limit).execute()
        return [self._map_to_group(row) for row in result.data]

    def add_member(self, group_id: str, user_id: str) -> Optional[Group]:
        """Append a member. Returns the updated group, None if it is gone."""
        row = self._get_row(group_id)
        if row is None:
            return None
        members = _as_list(row.get("members"))
        if user_id in members:
            return self._map_to_group(row)
        return self._save_lists(group_id, members + [user_id], _as_list(row.get("admins")))

    def remove_member(self, group_id: str, user_id: str) -> Optional[Group]:
        """Drop a user from both the member and admin lists."""
        row = self._get_row(group_id)
        if row is None:
            return None
        members = [m for m in _as_list(row.get("members")) if m != user_id]
        admins = [a for a in _as_list(row.get("admins")) if a != user_id]
        return self._save_lists(group_id, members, admins)

    def delete(self, group_id: str) -> None:
        self._db.table(self.table_name).delete().eq("id", group_id).execute()

    def touch(self, group_id: str) -> None:
        """Bump ``updated_at`` so member listings surface active groups first."""
        self._db.table(self.table_name).update({"updated_at": utc_now_iso()}).eq(
            "id", group_id
        ).execute()

    def _save_lists(self, group_id: str, members: list[str], admins: list[str]) -> Group:
        result = self._db.table(self.table_name).update({
            "members": members,
            "admins": admins,
            "updated_at": utc_now_iso(),
        }).eq("id", group_id).execute()
        return self._map_to_group(result.data[0])

    def _map_to_group(self, data: dict[str, Any]) -> Group:
        return Group(
            id=str(data["id"]),
            name=data.get("name") or "",
            description=data.get("description") or "",
            sport=data.get("sport") or "",
            creator_id=str(data["creator_id"]),
            members=_as_list(data.get("members")),
            admins=_as_list(data.get("admins")),
            photo_url=data.get("photo_url"),
            is_private=bool(data.get("is_private", False)),
            max_members=data.get("max_members"),
            rules=list(data.get("rules") or []),
            tags=list(data.get("tags") or []),
            created_at=data["created_at"],
            updated_at=data.get("updated_at") or data["created_at"],
        )


class GroupMessageRepository(BaseRepository[GroupMessage]):
    table_name = "group_messages"

    def create(self, group_id: str, sender_id: str, content: str) -> GroupMessage:
        result = self._db.table(self.table_name).insert({
            "group_id": group_id,
            "sender_id": sender_id,
            "content": content,
            "created_at": utc_now_iso(),
        }).execute()
        return self._map_to_message(result.data[0])

    def list_for_group(self, group_id: str, since: Optional[str] = None) -> list[GroupMessage]:
        """
        Messages oldest first.

        Args:
            since: Only messages created at or after this ISO timestamp
        """
        query = self._db.table(self.table_name).select("*").eq("group_id", group_id)
        if since:
            query = query.gte("created_at", since)
        result = query.order("created_at").execute()
        return [self._map_to_message(row) for row in result.data]

    def _map_to_message(self, data: dict[str, Any]) -> GroupMessage:
        return GroupMessage(
            id=str(data["id"]),
            group_id=str(data["group_id"]),
            sender_id=str(data["sender_id"]),
            content=data.get("content") or "",
            created_at=data["created_at"],
        )


def _as_list(value: Any) -> list[str]:
    return [str(v) for v in (value or [])]
