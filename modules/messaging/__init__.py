"""
Messaging module.

Two-party conversations, messages, read receipts and a polling message
stream.
"""

from .interfaces import IMessagingService
from .models import Conversation, Message
from .exceptions import (
    ConversationAccessDeniedError,
    ConversationNotFoundError,
    MessagesNotAllowedError,
    SelfConversationError,
)

__all__ = [
    "IMessagingService",
    "Conversation",
    "Message",
    "ConversationAccessDeniedError",
    "ConversationNotFoundError",
    "MessagesNotAllowedError",
    "SelfConversationError",
]
