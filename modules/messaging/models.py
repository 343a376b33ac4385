"""
Messaging module data models.

Column names match the ``conversations`` and ``messages`` tables.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Conversation(BaseModel):
    """A two-party conversation with its last-message cache."""

    id: str
    participants: list[str] = Field(default_factory=list)
    last_message: str = ""
    last_message_time: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)

    def has_participant(self, user_id: str) -> bool:
        return user_id in self.participants


class Message(BaseModel):
    id: str
    conversation_id: str
    sender_id: str
    receiver_id: str
    content: str
    read: bool = False
    created_at: datetime = Field(default_factory=_utc_now)


class SendMessageRequest(BaseModel):
    receiver_id: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1, max_length=5000)
    conversation_id: Optional[str] = Field(
        None, description="Existing conversation; looked up or created when omitted"
    )


class StartConversationRequest(BaseModel):
    user_id: str = Field(..., min_length=1, description="The other participant")


class ConversationListResponse(BaseModel):
    conversations: list[Conversation]


class MessageListResponse(BaseModel):
    messages: list[Message]


class UnreadMessagesResponse(BaseModel):
    unread_count: int
