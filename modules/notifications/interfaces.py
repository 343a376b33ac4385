"""
Notifications module interface.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import Notification, NotificationType, NotificationWithSender


@runtime_checkable
class INotificationService(Protocol):
    """Contract used by the API layer and by modules that notify users."""

    async def list_notifications(
        self,
        user_id: str,
        limit: Optional[int] = None,
    ) -> list[NotificationWithSender]:
        """Newest-first notifications with a sender card where applicable."""
        ...

    async def create_notification(
        self,
        user_id: str,
        type: NotificationType,
        title: str,
        content: str,
        **extra: Any,
    ) -> Notification:
        """Create an unread notification for ``user_id``."""
        ...

    async def mark_read(self, notification_id: str, user_id: str) -> None:
        """
        Mark one notification read.

        Raises:
            NotificationNotFoundError: If it doesn't exist
            NotificationAccessDeniedError: If it belongs to someone else
        """
        ...

    async def mark_all_read(self, user_id: str) -> None:
        ...

    async def unread_count(self, user_id: str) -> int:
        ...

    async def delete_for_user(self, user_id: str) -> None:
        ...
