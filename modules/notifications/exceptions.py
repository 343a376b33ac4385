"""
Notifications module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError


class NotificationNotFoundError(NotFoundError):
    def __init__(self, notification_id: str):
        super().__init__(
            f"Notification not found: {notification_id}",
            code="NOTIFICATION_NOT_FOUND",
            details={"notification_id": notification_id},
        )


class NotificationAccessDeniedError(AuthorizationError):
    def __init__(self, notification_id: str, user_id: str):
        super().__init__(
            f"Access denied to notification: {notification_id}",
            code="NOTIFICATION_ACCESS_DENIED",
            details={"notification_id": notification_id, "user_id": user_id},
        )
