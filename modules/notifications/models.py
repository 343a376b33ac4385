"""
Notifications module data models.

Connection requests are stored as notifications of type
``connection_request`` carrying a ``status``.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.profiles.models import ProfileSummary


class NotificationType(str, Enum):
    CONNECTION_REQUEST = "connection_request"
    CONNECTION_ACCEPTED = "connection_accepted"
    NEW_FOLLOWER = "new_follower"
    POST_LIKE = "post_like"
    POST_COMMENT = "post_comment"
    NEW_MESSAGE = "new_message"


class RequestStatus(str, Enum):
    """Status of a connection request notification."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Notification(BaseModel):
    """A notification addressed to ``user_id``."""

    id: str = Field(..., description="Notification ID")
    user_id: str = Field(..., description="Recipient user ID")
    type: NotificationType
    title: str = ""
    content: str = ""
    read: bool = False

    sender_id: Optional[str] = None
    post_id: Optional[str] = None
    comment_id: Optional[str] = None
    message_id: Optional[str] = None

    # Connection request fields
    status: Optional[RequestStatus] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None


class NotificationWithSender(Notification):
    sender: Optional[ProfileSummary] = None


class NotificationListResponse(BaseModel):
    notifications: list[NotificationWithSender]
    unread_count: int


class UnreadCountResponse(BaseModel):
    unread_count: int
