"""
Profile repository for database access.

Encapsulates Supabase queries for the ``profiles`` and ``presence`` tables.
Follower, following and connection lists are ``text[]`` columns on the
profile row and are updated read-modify-write.
"""

import re
from typing import Optional, Any

from shared.pagination import PageCursor
from shared.repository import BaseRepository, utc_now_iso
from .models import Presence, Profile, PrivacySettings

RELATION_FIELDS = ("followers", "following", "connections")

# Characters with meaning inside a PostgREST or() filter
_FILTER_CHARS = re.compile(r"[,()%*\\]")


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for profile data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying the caller.
    """

    table_name = "profiles"

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        row = self._get_row(user_id)
        if row is None:
            return None
        return self._map_to_profile(row)

    def create(self, data: dict[str, Any]) -> Profile:
        result = self._db.table(self.table_name).insert(data).execute()
        return self._map_to_profile(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[Profile]:
        """Apply a partial update and return the updated profile."""
        payload = {**data, "updated_at": utc_now_iso()}
        result = self._db.table(self.table_name).update(payload).eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def delete(self, user_id: str) -> None:
        self._db.table(self.table_name).delete().eq("id", user_id).execute()

    def search(
        self,
        term: str,
        role: Optional[str] = None,
        limit: int = 50,
    ) -> list[Profile]:
        """
        Case-insensitive search on display name or email.

        Only profiles that allow being found in search are returned.
        """
        cleaned = _FILTER_CHARS.sub("", term).strip()
        query = self._db.table(self.table_name).select("*")
        if cleaned:
            query = query.or_(
                f"display_name.ilike.%{cleaned}%,email.ilike.%{cleaned}%"
            )
        if role:
            query = query.eq("role", role)
        result = query.order("display_name").limit(limit).execute()

        profiles = [self._map_to_profile(row) for row in result.data]
        return [p for p in profiles if p.privacy.allow_profile_search]

    def list_page(
        self,
        page_size: int,
        after: Optional[PageCursor] = None,
    ) -> list[Profile]:
        """Newest-first page of profiles; fetches one extra row for has_more."""
        query = self._newest_first(self._db.table(self.table_name).select("*"), after)
        result = query.limit(page_size + 1).execute()
        return [self._map_to_profile(row) for row in result.data]

    def count(self) -> int:
        result = self._db.table(self.table_name).select("id", count="exact").execute()
        return result.count or 0

    # -------------------------------------------------------------------------
    # Relation lists
    # -------------------------------------------------------------------------

    def add_to_list(self, user_id: str, field: str, value: str) -> bool:
        """
        Add ``value`` to a relation list if absent.

        Returns:
            True if the list changed.
        """
        return self._modify_list(user_id, field, value, add=True)

    def remove_from_list(self, user_id: str, field: str, value: str) -> bool:
        """
        Remove ``value`` from a relation list if present.

        Returns:
            True if the list changed.
        """
        return self._modify_list(user_id, field, value, add=False)

    def find_referencing(self, field: str, user_id: str) -> list[str]:
        """IDs of profiles whose ``field`` list contains ``user_id``."""
        if field not in RELATION_FIELDS:
            raise ValueError(f"Unknown relation field: {field}")
        result = (
            self._db.table(self.table_name)
            .select("id")
            .contains(field, [user_id])
            .execute()
        )
        return [str(row["id"]) for row in result.data]

    # -------------------------------------------------------------------------
    # Privacy
    # -------------------------------------------------------------------------

    def get_privacy(self, user_id: str) -> Optional[PrivacySettings]:
        result = (
            self._db.table(self.table_name)
            .select("id, privacy")
            .eq("id", user_id)
            .execute()
        )
        if not result.data:
            return None
        return PrivacySettings(**(result.data[0].get("privacy") or {}))

    def save_privacy(self, user_id: str, settings: PrivacySettings) -> None:
        self._db.table(self.table_name).update(
            {"privacy": settings.model_dump(mode="json"), "updated_at": utc_now_iso()}
        ).eq("id", user_id).execute()

    # -------------------------------------------------------------------------
    # Presence
    # -------------------------------------------------------------------------

    def get_presence(self, user_id: str) -> Optional[Presence]:
        result = self._db.table("presence").select("*").eq("user_id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_presence(result.data[0])

    def upsert_presence(self, user_id: str, online: bool) -> Presence:
        """Record the user's status and stamp ``last_seen`` with the current time."""
        result = self._db.table("presence").upsert(
            {"user_id": user_id, "online": online, "last_seen": utc_now_iso()},
            on_conflict="user_id",
        ).execute()
        return self._map_to_presence(result.data[0])

    def delete_presence(self, user_id: str) -> None:
        self._db.table("presence").delete().eq("user_id", user_id).execute()

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _modify_list(self, user_id: str, field: str, value: str, add: bool) -> bool:
        if field not in RELATION_FIELDS:
            raise ValueError(f"Unknown relation field: {field}")

        result = (
            self._db.table(self.table_name)
            .select(f"id, {field}")
            .eq("id", user_id)
            .execute()
        )
        if not result.data:
            return False

        current = [str(v) for v in (result.data[0].get(field) or [])]
        if add:
            if value in current:
                return False
            updated = current + [value]
        else:
            if value not in current:
                return False
            updated = [v for v in current if v != value]

        self._db.table(self.table_name).update(
            {field: updated, "updated_at": utc_now_iso()}
        ).eq("id", user_id).execute()
        return True

    def _map_to_profile(self, data: dict[str, Any]) -> Profile:
        """Map database row to Profile model, defaulting missing columns."""
        cleaned = {k: v for k, v in data.items() if v is not None}
        cleaned["id"] = str(data["id"])
        for field in RELATION_FIELDS:
            cleaned[field] = [str(v) for v in (data.get(field) or [])]
        return Profile.model_validate(cleaned)

    def _map_to_presence(self, data: dict[str, Any]) -> Presence:
        return Presence(
            user_id=str(data["user_id"]),
            online=bool(data.get("online", False)),
            last_seen=data.get("last_seen"),
        )
