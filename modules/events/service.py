"""
Events service implementation.

Visibility follows the post rules: the creator sees everything, public
events are open, followers-only and connections-only events need the
matching relation on the viewer's profile.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from modules.posts.rules import visible_scopes
from modules.profiles.models import Profile
from modules.profiles.repository import ProfileRepository

from .interfaces import IEventService
from .models import CreateEventRequest, Event, UpdateEventRequest
from .repository import EventRepository
from .exceptions import EventAccessDeniedError, EventFullError, EventNotFoundError

logger = logging.getLogger(__name__)


def can_view_event(event: Event, viewer: Optional[Profile]) -> bool:
    return event.visibility in visible_scopes(event.creator_id, viewer)


class EventService(IEventService):
    """Events service backed by Supabase."""

    def __init__(self, repository: EventRepository, profiles: ProfileRepository):
        self._repo = repository
        self._profiles = profiles

    def _viewer(self, viewer_id: str) -> Optional[Profile]:
        return self._profiles.get_by_id(viewer_id)

    def _require_visible(self, event_id: str, viewer_id: str) -> Event:
        event = self._repo.get_by_id(event_id)
        if event is None or not can_view_event(event, self._viewer(viewer_id)):
            raise EventNotFoundError(event_id)
        return event

    def _require_creator(self, event_id: str, user_id: str) -> Event:
        event = self._require_visible(event_id, user_id)
        if event.creator_id != user_id:
            raise EventAccessDeniedError(event_id, user_id)
        return event

    def _visible(self, events: list[Event], viewer_id: str) -> list[Event]:
        viewer = self._viewer(viewer_id)
        return [e for e in events if can_view_event(e, viewer)]

    async def create_event(self, creator_id: str, request: CreateEventRequest) -> Event:
        data = request.model_dump(mode="json")
        data.update({"creator_id": creator_id, "attendees": []})
        event = self._repo.create(data)
        logger.info(f"Created event {event.id} for {creator_id}")
        return event

    async def get_event(self, event_id: str, viewer_id: str) -> Event:
        return self._require_visible(event_id, viewer_id)

    async def update_event(
        self, event_id: str, user_id: str, updates: UpdateEventRequest
    ) -> Event:
        event = self._require_creator(event_id, user_id)
        data = updates.model_dump(mode="json", exclude_unset=True)
        if not data:
            return event
        return self._repo.update(event_id, data)

    async def delete_event(self, event_id: str, user_id: str) -> None:
        self._require_creator(event_id, user_id)
        self._repo.delete(event_id)
        logger.info(f"Deleted event {event_id}")

    async def attend(self, event_id: str, user_id: str) -> Event:
        event = self._require_visible(event_id, user_id)
        if user_id in event.attendees:
            return event
        if event.is_full:
            raise EventFullError(event_id, event.max_attendees)
        return self._repo.set_attendees(event_id, event.attendees + [user_id])

    async def unattend(self, event_id: str, user_id: str) -> Event:
        event = self._require_visible(event_id, user_id)
        if user_id not in event.attendees:
            return event
        return self._repo.set_attendees(
            event_id, [a for a in event.attendees if a != user_id]
        )

    async def list_events(self, viewer_id: str) -> list[Event]:
        return self._visible(self._repo.list_soonest(), viewer_id)

    async def list_upcoming(self, viewer_id: str) -> list[Event]:
        now = datetime.now(timezone.utc).isoformat()
        return self._visible(self._repo.list_soonest(starting_from=now), viewer_id)

    async def list_by_organizer(self, organizer_id: str, viewer_id: str) -> list[Event]:
        allowed = sorted(visible_scopes(organizer_id, self._viewer(viewer_id)), key=lambda v: v.value)
        return self._repo.list_by_creator(organizer_id, allowed)

    async def list_by_sport(self, sport: str, viewer_id: str) -> list[Event]:
        return self._visible(self._repo.list_soonest(sport=sport), viewer_id)
