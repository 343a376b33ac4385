"""
Notification API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_notification_service
from shared.models import AuthenticatedUser

from .interfaces import INotificationService
from .models import NotificationListResponse, UnreadCountResponse
from .exceptions import NotificationAccessDeniedError, NotificationNotFoundError

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
) -> NotificationListResponse:
    """List the current user's notifications, newest first."""
    notifications = await service.list_notifications(user.id, limit)
    unread = await service.unread_count(user.id)
    return NotificationListResponse(notifications=notifications, unread_count=unread)


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
) -> UnreadCountResponse:
    return UnreadCountResponse(unread_count=await service.unread_count(user.id))


@router.post("/read-all", status_code=204)
async def mark_all_read(
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
) -> None:
    await service.mark_all_read(user.id)


@router.post("/{notification_id}/read", status_code=204)
async def mark_read(
    notification_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
) -> None:
    try:
        await service.mark_read(notification_id, user.id)
    except (NotificationNotFoundError, NotificationAccessDeniedError):
        raise HTTPException(status_code=404, detail="Notification not found")
