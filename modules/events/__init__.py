"""
Events module.

Games, practices, tournaments and camps with attendee lists, shown to
viewers under the same visibility levels as posts.
"""

from .interfaces import IEventService
from .models import Event, EventType
from .exceptions import EventAccessDeniedError, EventFullError, EventNotFoundError

__all__ = [
    "IEventService",
    "Event",
    "EventType",
    "EventAccessDeniedError",
    "EventFullError",
    "EventNotFoundError",
]
