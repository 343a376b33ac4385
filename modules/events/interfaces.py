"""
Events module interface.
"""

from typing import Protocol, runtime_checkable

from .models import CreateEventRequest, Event, UpdateEventRequest


@runtime_checkable
class IEventService(Protocol):
    """
    Interface for events.

    Events the viewer may not see are reported as missing and left out
    of every listing.
    """

    async def create_event(self, creator_id: str, request: CreateEventRequest) -> Event:
        ...

    async def get_event(self, event_id: str, viewer_id: str) -> Event:
        """
        Raises:
            EventNotFoundError: If it doesn't exist or is hidden from the viewer
        """
        ...

    async def update_event(
        self, event_id: str, user_id: str, updates: UpdateEventRequest
    ) -> Event:
        """
        Raises:
            EventNotFoundError: If it doesn't exist or is hidden from the user
            EventAccessDeniedError: If the user is not the creator
        """
        ...

    async def delete_event(self, event_id: str, user_id: str) -> None:
        ...

    async def attend(self, event_id: str, user_id: str) -> Event:
        """
        Add the user to the attendees. Attending twice is a no-op.

        Raises:
            EventFullError: If max_attendees is reached
        """
        ...

    async def unattend(self, event_id: str, user_id: str) -> Event:
        ...

    async def list_events(self, viewer_id: str) -> list[Event]:
        """Visible events, soonest first."""
        ...

    async def list_upcoming(self, viewer_id: str) -> list[Event]:
        """Visible events that have not started yet, soonest first."""
        ...

    async def list_by_organizer(self, organizer_id: str, viewer_id: str) -> list[Event]:
        ...

    async def list_by_sport(self, sport: str, viewer_id: str) -> list[Event]:
        ...
