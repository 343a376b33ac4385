"""
Notifications service implementation.
"""

import logging
from functools import partial
from typing import Any, Optional

from shared.concurrency import fan_out
from modules.profiles.models import ProfileSummary
from modules.profiles.repository import ProfileRepository

from .interfaces import INotificationService
from .models import Notification, NotificationType, NotificationWithSender
from .repository import NotificationRepository
from .exceptions import NotificationAccessDeniedError, NotificationNotFoundError

logger = logging.getLogger(__name__)


async def attach_senders(
    notifications: list[Notification],
    profiles: ProfileRepository,
) -> list[NotificationWithSender]:
    """Join notifications with sender cards, one lookup per distinct sender."""
    sender_ids = list(dict.fromkeys(n.sender_id for n in notifications if n.sender_id))
    found = await fan_out(*(partial(profiles.get_by_id, sid) for sid in sender_ids))
    senders = {
        sid: ProfileSummary.from_profile(p)
        for sid, p in zip(sender_ids, found)
        if p is not None
    }
    return [
        NotificationWithSender(
            **n.model_dump(),
            sender=senders.get(n.sender_id) if n.sender_id else None,
        )
        for n in notifications
    ]


class NotificationService(INotificationService):
    """Notification service backed by Supabase."""

    def __init__(
        self,
        repository: NotificationRepository,
        profiles: ProfileRepository,
    ):
        self._repo = repository
        self._profiles = profiles

    async def list_notifications(
        self,
        user_id: str,
        limit: Optional[int] = None,
    ) -> list[NotificationWithSender]:
        notifications = self._repo.list_for_user(user_id, limit)
        return await attach_senders(notifications, self._profiles)

    async def create_notification(
        self,
        user_id: str,
        type: NotificationType,
        title: str,
        content: str,
        **extra: Any,
    ) -> Notification:
        data = {
            "user_id": user_id,
            "type": type.value,
            "title": title,
            "content": content,
            **{k: v for k, v in extra.items() if v is not None},
        }
        notification = self._repo.create(data)
        logger.debug(f"Created {type.value} notification for {user_id}")
        return notification

    async def mark_read(self, notification_id: str, user_id: str) -> None:
        notification = self._repo.get_by_id(notification_id)
        if notification is None:
            raise NotificationNotFoundError(notification_id)
        if notification.user_id != user_id:
            raise NotificationAccessDeniedError(notification_id, user_id)
        self._repo.mark_read(notification_id)

    async def mark_all_read(self, user_id: str) -> None:
        self._repo.mark_all_read(user_id)

    async def unread_count(self, user_id: str) -> int:
        return self._repo.count_unread(user_id)

    async def delete_for_user(self, user_id: str) -> None:
        self._repo.delete_for_user(user_id)
