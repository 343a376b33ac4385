"""
Groups API endpoints, mounted at /api/groups.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sse_starlette.sse import EventSourceResponse

from api.middleware.auth import get_current_user
from api.dependencies import get_group_service
from shared.models import AuthenticatedUser

from .interfaces import IGroupService
from .models import (
    AddMemberRequest,
    CreateGroupRequest,
    Group,
    GroupListResponse,
    GroupMessage,
    GroupMessageListResponse,
    SendGroupMessageRequest,
)
from .exceptions import GroupNotFoundError

router = APIRouter()


@router.get("", response_model=GroupListResponse)
async def list_my_groups(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
) -> GroupListResponse:
    """Groups the caller belongs to."""
    return GroupListResponse(groups=await service.list_user_groups(user.id))


@router.post("", response_model=Group, status_code=201)
async def create_group(
    request: CreateGroupRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
) -> Group:
    return await service.create_group(user.id, request)


@router.get("/search", response_model=GroupListResponse)
async def search_groups(
    q: str = Query(default="", max_length=100),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
) -> GroupListResponse:
    return GroupListResponse(groups=await service.search_groups(q, user.id))


@router.get("/sport/{sport}", response_model=GroupListResponse)
async def list_by_sport(
    sport: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
) -> GroupListResponse:
    return GroupListResponse(groups=await service.list_by_sport(sport, user.id))


@router.get("/{group_id}", response_model=Group)
async def get_group(
    group_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
) -> Group:
    return await service.get_group(group_id, user.id)


@router.post("/{group_id}/members", response_model=Group)
async def join_group(
    group_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
) -> Group:
    return await service.join_group(group_id, user.id)


@router.post("/{group_id}/members/add", response_model=Group)
async def add_member(
    group_id: str,
    request: AddMemberRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
) -> Group:
    """Admins add a user, including to private groups."""
    return await service.add_member(group_id, user.id, request.user_id)


@router.delete("/{group_id}/members", status_code=204)
async def leave_group(
    group_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
) -> None:
    await service.leave_group(group_id, user.id)


@router.get("/{group_id}/messages", response_model=GroupMessageListResponse)
async def get_messages(
    group_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
) -> GroupMessageListResponse:
    return GroupMessageListResponse(messages=await service.get_messages(group_id, user.id))


@router.post("/{group_id}/messages", response_model=GroupMessage, status_code=201)
async def send_message(
    group_id: str,
    request: SendGroupMessageRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
) -> GroupMessage:
    return await service.send_message(group_id, user.id, request.content)


async def group_message_event_generator(group_id: str, user_id: str, service: IGroupService):
    async for message in service.stream_messages(group_id, user_id):
        yield {
            "event": "message",
            "data": message.model_dump_json(),
        }


@router.get("/{group_id}/stream")
async def stream_messages(
    group_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGroupService = Depends(get_group_service),
):
    """Stream a group's chat via SSE, existing messages first."""
    try:
        group = await service.get_group(group_id, user.id)
    except GroupNotFoundError:
        raise HTTPException(status_code=404, detail="Group not found")
    if not group.is_member(user.id):
        raise HTTPException(status_code=403, detail="Not a member of this group")

    return EventSourceResponse(
        group_message_event_generator(group_id, user.id, service),
        media_type="text/event-stream",
    )
