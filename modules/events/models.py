"""
Events module data models.

Column names match the ``events`` table.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.posts.models import PostVisibility


class EventType(str, Enum):
    GAME = "game"
    PRACTICE = "practice"
    TOURNAMENT = "tournament"
    CAMP = "camp"
    OTHER = "other"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Event(BaseModel):
    id: str
    title: str
    description: str = ""
    date: datetime
    location: str = ""
    creator_id: str
    visibility: PostVisibility = PostVisibility.PUBLIC
    type: EventType = EventType.OTHER
    sport: str = ""
    attendees: list[str] = Field(default_factory=list)
    max_attendees: Optional[int] = None
    requirements: list[str] = Field(default_factory=list)
    media: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)

    @property
    def is_full(self) -> bool:
        return self.max_attendees is not None and len(self.attendees) >= self.max_attendees


class CreateEventRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    date: datetime
    location: str = Field(default="", max_length=200)
    visibility: PostVisibility = PostVisibility.PUBLIC
    type: EventType = EventType.OTHER
    sport: str = ""
    max_attendees: Optional[int] = Field(None, ge=1)
    requirements: list[str] = Field(default_factory=list)
    media: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class UpdateEventRequest(BaseModel):
    """Partial event update; attendees change only through attend/unattend."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    date: Optional[datetime] = None
    location: Optional[str] = Field(None, max_length=200)
    visibility: Optional[PostVisibility] = None
    type: Optional[EventType] = None
    sport: Optional[str] = None
    max_attendees: Optional[int] = Field(None, ge=1)
    requirements: Optional[list[str]] = None
    media: Optional[list[str]] = None
    tags: Optional[list[str]] = None


class EventListResponse(BaseModel):
    events: list[Event]
