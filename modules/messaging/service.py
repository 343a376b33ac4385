"""
Messaging service implementation.
"""

import asyncio
import logging
from typing import AsyncIterator, Optional, TYPE_CHECKING

from shared.config import Settings, get_settings
from shared.polling import Poller
from modules.notifications.models import NotificationType
from modules.profiles.repository import ProfileRepository
from modules.profiles.exceptions import ProfileNotFoundError

from .interfaces import IMessagingService
from .models import Conversation, Message
from .repository import ConversationRepository, MessageRepository
from .exceptions import (
    ConversationAccessDeniedError,
    ConversationNotFoundError,
    MessagesNotAllowedError,
    SelfConversationError,
)

if TYPE_CHECKING:
    from modules.notifications.interfaces import INotificationService

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100


class MessagingService(IMessagingService):
    """Messaging service backed by Supabase."""

    def __init__(
        self,
        conversations: ConversationRepository,
        messages: MessageRepository,
        profiles: ProfileRepository,
        notifications: Optional["INotificationService"] = None,
        settings: Optional[Settings] = None,
    ):
        self._conversations = conversations
        self._messages = messages
        self._profiles = profiles
        self._notifications = notifications
        self._settings = settings or get_settings()

    async def get_or_create_conversation(self, user_id: str, other_id: str) -> Conversation:
        if user_id == other_id:
            raise SelfConversationError()
        existing = self._conversations.find_between(user_id, other_id)
        if existing is not None:
            return existing
        conversation = self._conversations.create([user_id, other_id])
        logger.debug(f"Started conversation {conversation.id}")
        return conversation

    async def get_conversation(self, conversation_id: str, user_id: str) -> Conversation:
        conversation = self._conversations.get_by_id(conversation_id)
        if conversation is None:
            raise ConversationNotFoundError(conversation_id)
        if not conversation.has_participant(user_id):
            raise ConversationAccessDeniedError(conversation_id, user_id)
        return conversation

    async def send_message(
        self,
        sender_id: str,
        receiver_id: str,
        content: str,
        conversation_id: Optional[str] = None,
    ) -> Message:
        receiver = self._profiles.get_by_id(receiver_id)
        if receiver is None:
            raise ProfileNotFoundError(receiver_id)
        if not receiver.privacy.allow_messages:
            raise MessagesNotAllowedError(receiver_id)

        if conversation_id:
            conversation = await self.get_conversation(conversation_id, sender_id)
            if not conversation.has_participant(receiver_id):
                raise ConversationAccessDeniedError(conversation_id, receiver_id)
        else:
            conversation = await self.get_or_create_conversation(sender_id, receiver_id)

        message = self._messages.create(conversation.id, sender_id, receiver_id, content)
        self._conversations.update_last_message(conversation.id, content)

        if self._notifications is not None:
            await self._notifications.create_notification(
                receiver_id,
                NotificationType.NEW_MESSAGE,
                "New message",
                content[:PREVIEW_LENGTH],
                sender_id=sender_id,
                message_id=message.id,
            )
        return message

    async def list_conversations(self, user_id: str) -> list[Conversation]:
        return self._conversations.list_for_user(user_id)

    async def get_messages(self, conversation_id: str, user_id: str) -> list[Message]:
        await self.get_conversation(conversation_id, user_id)
        return self._messages.list_for_conversation(conversation_id)

    async def mark_read(self, conversation_id: str, user_id: str) -> None:
        await self.get_conversation(conversation_id, user_id)
        self._messages.mark_read(conversation_id, user_id)

    async def unread_count(self, user_id: str) -> int:
        return self._messages.count_unread(user_id)

    async def stream_messages(self, conversation_id: str, user_id: str) -> AsyncIterator[Message]:
        await self.get_conversation(conversation_id, user_id)

        since: Optional[str] = None
        # Ids already emitted at the ``since`` timestamp; the query is inclusive
        seen: set[str] = set()

        async def poll() -> list[Message]:
            return await asyncio.to_thread(
                self._messages.list_for_conversation, conversation_id, since
            )

        async with Poller(poll, self._settings.message_poll_interval) as poller:
            async for batch in poller:
                for message in batch:
                    if message.id not in seen:
                        yield message
                if batch:
                    newest = batch[-1].created_at
                    since = newest.isoformat()
                    seen = {m.id for m in batch if m.created_at == newest}
