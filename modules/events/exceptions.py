"""
Events module exceptions.
"""

from shared.exceptions import AuthorizationError, ConflictError, NotFoundError


class EventNotFoundError(NotFoundError):
    """Raised when an event does not exist or the viewer may not see it."""

    def __init__(self, event_id: str):
        super().__init__(
            f"Event not found: {event_id}",
            code="EVENT_NOT_FOUND",
            details={"event_id": event_id},
        )


class EventAccessDeniedError(AuthorizationError):
    """Raised when someone other than the creator changes an event."""

    def __init__(self, event_id: str, user_id: str):
        super().__init__(
            f"Access denied to event: {event_id}",
            code="EVENT_ACCESS_DENIED",
            details={"event_id": event_id, "user_id": user_id},
        )


class EventFullError(ConflictError):
    def __init__(self, event_id: str, max_attendees: int):
        super().__init__(
            "Event is full",
            code="EVENT_FULL",
            details={"event_id": event_id, "max_attendees": max_attendees},
        )
