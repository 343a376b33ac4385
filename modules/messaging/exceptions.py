"""
Messaging module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError, ValidationError


class ConversationNotFoundError(NotFoundError):
    def __init__(self, conversation_id: str):
        super().__init__(
            f"Conversation not found: {conversation_id}",
            code="CONVERSATION_NOT_FOUND",
            details={"conversation_id": conversation_id},
        )


class ConversationAccessDeniedError(AuthorizationError):
    """Raised when a user is not a participant of the conversation."""

    def __init__(self, conversation_id: str, user_id: str):
        super().__init__(
            f"Access denied to conversation: {conversation_id}",
            code="CONVERSATION_ACCESS_DENIED",
            details={"conversation_id": conversation_id, "user_id": user_id},
        )


class MessagesNotAllowedError(AuthorizationError):
    """Raised when the receiver's privacy settings refuse messages."""

    def __init__(self, receiver_id: str):
        super().__init__(
            "This user is not accepting messages",
            code="MESSAGES_NOT_ALLOWED",
            details={"receiver_id": receiver_id},
        )


class SelfConversationError(ValidationError):
    def __init__(self):
        super().__init__("Cannot start a conversation with yourself", code="SELF_CONVERSATION")
