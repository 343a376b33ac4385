"""
Messaging module interface.
"""

from typing import AsyncIterator, Optional, Protocol, runtime_checkable

from .models import Conversation, Message


@runtime_checkable
class IMessagingService(Protocol):
    """
    Interface for direct messaging.

    Only participants may read a conversation; non-participants are told
    it does not exist.
    """

    async def get_or_create_conversation(self, user_id: str, other_id: str) -> Conversation:
        ...

    async def get_conversation(self, conversation_id: str, user_id: str) -> Conversation:
        """
        Raises:
            ConversationNotFoundError: If it doesn't exist
            ConversationAccessDeniedError: If user_id is not a participant
        """
        ...

    async def send_message(
        self,
        sender_id: str,
        receiver_id: str,
        content: str,
        conversation_id: Optional[str] = None,
    ) -> Message:
        """
        Send a message and refresh the conversation's last-message cache.

        Raises:
            ProfileNotFoundError: If the receiver doesn't exist
            MessagesNotAllowedError: If the receiver refuses messages
            ConversationAccessDeniedError: If the given conversation is not
                between sender and receiver
        """
        ...

    async def list_conversations(self, user_id: str) -> list[Conversation]:
        ...

    async def get_messages(self, conversation_id: str, user_id: str) -> list[Message]:
        """Messages oldest first."""
        ...

    async def mark_read(self, conversation_id: str, user_id: str) -> None:
        """Mark every unread message addressed to the user as read."""
        ...

    async def unread_count(self, user_id: str) -> int:
        ...

    def stream_messages(self, conversation_id: str, user_id: str) -> AsyncIterator[Message]:
        """
        Poll a conversation and yield each message once, oldest first.

        Runs until the consumer stops iterating.
        """
        ...
