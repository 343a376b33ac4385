"""
Messaging API endpoints.

``router`` is mounted at /api/conversations and ``messages_router`` at
/api/messages.
"""

from fastapi import APIRouter, Depends, HTTPException
from sse_starlette.sse import EventSourceResponse

from api.middleware.auth import get_current_user
from api.dependencies import get_messaging_service
from shared.models import AuthenticatedUser

from .interfaces import IMessagingService
from .models import (
    Conversation,
    ConversationListResponse,
    Message,
    MessageListResponse,
    SendMessageRequest,
    StartConversationRequest,
    UnreadMessagesResponse,
)
from .exceptions import ConversationAccessDeniedError, ConversationNotFoundError

router = APIRouter()
messages_router = APIRouter()


@router.get("", response_model=ConversationListResponse)
async def list_conversations(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> ConversationListResponse:
    """The caller's conversations, most recent activity first."""
    return ConversationListResponse(conversations=await service.list_conversations(user.id))


@router.post("", response_model=Conversation)
async def start_conversation(
    request: StartConversationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> Conversation:
    return await service.get_or_create_conversation(user.id, request.user_id)


@router.get("/{conversation_id}/messages", response_model=MessageListResponse)
async def get_messages(
    conversation_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> MessageListResponse:
    try:
        messages = await service.get_messages(conversation_id, user.id)
    except (ConversationNotFoundError, ConversationAccessDeniedError):
        raise HTTPException(status_code=404, detail="Conversation not found")
    return MessageListResponse(messages=messages)


@router.post("/{conversation_id}/read", status_code=204)
async def mark_read(
    conversation_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> None:
    try:
        await service.mark_read(conversation_id, user.id)
    except (ConversationNotFoundError, ConversationAccessDeniedError):
        raise HTTPException(status_code=404, detail="Conversation not found")


async def message_event_generator(
    conversation_id: str,
    user_id: str,
    service: IMessagingService,
):
    """
    Generate SSE events for a conversation.

    Yields events in the format:
        event: message
        data: <message json>
    """
    async for message in service.stream_messages(conversation_id, user_id):
        yield {
            "event": "message",
            "data": message.model_dump_json(),
        }


@router.get("/{conversation_id}/stream")
async def stream_messages(
    conversation_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
):
    """
    Stream a conversation's messages via SSE.

    Existing messages are sent first, then each new message once as it
    arrives. Polling stops when the client disconnects.
    """
    try:
        await service.get_conversation(conversation_id, user.id)
    except (ConversationNotFoundError, ConversationAccessDeniedError):
        raise HTTPException(status_code=404, detail="Conversation not found")

    return EventSourceResponse(
        message_event_generator(conversation_id, user.id, service),
        media_type="text/event-stream",
    )


@messages_router.post("", response_model=Message, status_code=201)
async def send_message(
    request: SendMessageRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> Message:
    try:
        return await service.send_message(
            user.id, request.receiver_id, request.content, request.conversation_id
        )
    except ConversationNotFoundError:
        raise HTTPException(status_code=404, detail="Conversation not found")


@messages_router.get("/unread-count", response_model=UnreadMessagesResponse)
async def unread_count(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMessagingService = Depends(get_messaging_service),
) -> UnreadMessagesResponse:
    return UnreadMessagesResponse(unread_count=await service.unread_count(user.id))
