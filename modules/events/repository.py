"""
Event repository for the ``events`` table.

``attendees`` is a ``text[]`` column updated read-modify-write.
"""

from typing import Optional, Any

from shared.repository import BaseRepository, utc_now_iso
from modules.posts.models import PostVisibility
from .models import Event

DEFAULT_LIMIT = 100


class EventRepository(BaseRepository[Event]):
    table_name = "events"

    def create(self, data: dict[str, Any]) -> Event:
        now = utc_now_iso()
        result = self._db.table(self.table_name).insert(
            {**data, "created_at": now, "updated_at": now}
        ).execute()
        return self._map_to_event(result.data[0])

    def get_by_id(self, event_id: str) -> Optional[Event]:
        row = self._get_row(event_id)
        if row is None:
            return None
        return self._map_to_event(row)

    def update(self, event_id: str, data: dict[str, Any]) -> Event:
        result = self._db.table(self.table_name).update(
            {**data, "updated_at": utc_now_iso()}
        ).eq("id", event_id).execute()
        return self._map_to_event(result.data[0])

    def delete(self, event_id: str) -> None:
        self._db.table(self.table_name).delete().eq("id", event_id).execute()

    def list_soonest(
        self,
        starting_from: Optional[str] = None,
        sport: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[Event]:
        """
        Events ordered by date, soonest first.

        Args:
            starting_from: Only events on or after this ISO timestamp
            sport: Only events for this sport
        """
        query = self._db.table(self.table_name).select("*")
        if starting_from:
            query = query.gte("date", starting_from)
        if sport:
            query = query.eq("sport", sport)
        result = query.order("date").limit(limit).execute()
        return [self._map_to_event(row) for row in result.data]

    def list_by_creator(
        self,
        creator_id: str,
        visibilities: list[PostVisibility],
        limit: int = DEFAULT_LIMIT,
    ) -> list[Event]:
        result = (
            self._db.table(self.table_name)
            .select("*")
            .eq("creator_id", creator_id)
            .in_("visibility", [v.value for v in visibilities])
            .order("date")
            .limit(limit)
            .execute()
        )
        return [self._map_to_event(row) for row in result.data]

    def set_attendees(self, event_id: str, attendees: list[str]) -> Event:
        return self.update(event_id, {"attendees": attendees})

    def _map_to_event(self, data: dict[str, Any]) -> Event:
        cleaned = {k: v for k, v in data.items() if v is not None}
        cleaned["id"] = str(data["id"])
        cleaned["creator_id"] = str(data["creator_id"])
        cleaned["attendees"] = [str(a) for a in (data.get("attendees") or [])]
        return Event.model_validate(cleaned)
