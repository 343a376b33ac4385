"""
Connection request workflow.

Requests live in the notifications table; accepting one writes the
connection to both profiles.
"""

import logging
from functools import partial

from shared.concurrency import fan_out
from modules.notifications.interfaces import INotificationService
from modules.notifications.models import Notification, NotificationType, RequestStatus
from modules.notifications.repository import NotificationRepository
from modules.notifications.service import attach_senders
from modules.profiles.models import ProfileSummary
from modules.profiles.repository import ProfileRepository
from modules.profiles.exceptions import ProfileNotFoundError, SelfRelationError

from .interfaces import IConnectionService
from .models import ConnectionRequest, ConnectionRequestWithSender
from .exceptions import (
    AlreadyConnectedError,
    ConnectionRequestAccessDeniedError,
    ConnectionRequestNotFoundError,
    ConnectionsNotAllowedError,
    RequestNotPendingError,
)

logger = logging.getLogger(__name__)


class ConnectionService(IConnectionService):
    """Connection service backed by Supabase."""

    def __init__(
        self,
        requests: NotificationRepository,
        profiles: ProfileRepository,
        notifications: INotificationService,
    ):
        self._requests = requests
        self._profiles = profiles
        self._notifications = notifications

    def _display_name(self, user_id: str) -> str:
        profile = self._profiles.get_by_id(user_id)
        return profile.display_name if profile and profile.display_name else "Someone"

    async def send_request(self, sender_id: str, receiver_id: str) -> ConnectionRequest:
        if sender_id == receiver_id:
            raise SelfRelationError("connect with")

        receiver = self._profiles.get_by_id(receiver_id)
        if receiver is None:
            raise ProfileNotFoundError(receiver_id)
        if sender_id in receiver.connections:
            raise AlreadyConnectedError(sender_id, receiver_id)
        if not receiver.privacy.allow_connections:
            raise ConnectionsNotAllowedError(receiver_id)

        pending = self._requests.find_connection_requests(
            sender_id=sender_id, receiver_id=receiver_id, status=RequestStatus.PENDING
        )
        if pending:
            return pending[0]

        request = await self._notifications.create_notification(
            receiver_id,
            NotificationType.CONNECTION_REQUEST,
            "Connection request",
            f"{self._display_name(sender_id)} wants to connect with you",
            sender_id=sender_id,
            status=RequestStatus.PENDING.value,
        )
        logger.info(f"Connection request {request.id}: {sender_id} -> {receiver_id}")
        return request

    async def list_received(self, user_id: str) -> list[ConnectionRequestWithSender]:
        requests = self._requests.find_connection_requests(
            receiver_id=user_id, status=RequestStatus.PENDING
        )
        return await attach_senders(requests, self._profiles)

    async def list_sent(self, user_id: str) -> list[ConnectionRequest]:
        return self._requests.find_connection_requests(
            sender_id=user_id, status=RequestStatus.PENDING
        )

    async def list_connections(self, user_id: str) -> list[ProfileSummary]:
        profile = self._profiles.get_by_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        found = await fan_out(
            *(partial(self._profiles.get_by_id, cid) for cid in profile.connections)
        )
        return [ProfileSummary.from_profile(p) for p in found if p is not None]

    def _require_pending(self, request_id: str, user_id: str) -> Notification:
        request = self._requests.get_by_id(request_id)
        if (
            request is None
            or request.type != NotificationType.CONNECTION_REQUEST
            or not request.sender_id
        ):
            raise ConnectionRequestNotFoundError(request_id)
        if request.user_id != user_id:
            raise ConnectionRequestAccessDeniedError(request_id, user_id)
        if request.status != RequestStatus.PENDING:
            status = request.status.value if request.status else "unknown"
            raise RequestNotPendingError(request_id, status)
        return request

    async def accept_request(self, request_id: str, user_id: str) -> None:
        request = self._require_pending(request_id, user_id)
        sender_id = str(request.sender_id)

        self._profiles.add_to_list(user_id, "connections", sender_id)
        self._profiles.add_to_list(sender_id, "connections", user_id)
        self._requests.update_status(request_id, RequestStatus.ACCEPTED)

        # A crossing request in the other direction is settled by this one
        for reverse in self._requests.find_connection_requests(
            sender_id=user_id, receiver_id=sender_id, status=RequestStatus.PENDING
        ):
            self._requests.update_status(reverse.id, RequestStatus.ACCEPTED)

        await self._notifications.create_notification(
            sender_id,
            NotificationType.CONNECTION_ACCEPTED,
            "Connection accepted",
            f"{self._display_name(user_id)} accepted your connection request",
            sender_id=user_id,
        )
        logger.info(f"Connection request {request_id} accepted")

    async def reject_request(self, request_id: str, user_id: str) -> None:
        self._require_pending(request_id, user_id)
        self._requests.update_status(request_id, RequestStatus.REJECTED)
        logger.info(f"Connection request {request_id} rejected")
