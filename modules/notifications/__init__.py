"""
Notifications module.

Stores and lists user notifications; connection requests are
notifications of type ``connection_request``.

Public API:
- INotificationService: Interface for notification operations
- Notification, NotificationType, RequestStatus
"""

from .interfaces import INotificationService
from .models import (
    Notification,
    NotificationType,
    NotificationWithSender,
    RequestStatus,
)
from .exceptions import NotificationNotFoundError, NotificationAccessDeniedError

__all__ = [
    "INotificationService",
    "Notification",
    "NotificationType",
    "NotificationWithSender",
    "RequestStatus",
    "NotificationNotFoundError",
    "NotificationAccessDeniedError",
]
