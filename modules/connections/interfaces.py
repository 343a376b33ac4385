"""
Connections module interface.
"""

from typing import Protocol, runtime_checkable

from modules.profiles.models import ProfileSummary

from .models import ConnectionRequest, ConnectionRequestWithSender


@runtime_checkable
class IConnectionService(Protocol):
    """Interface for the connection request workflow."""

    async def send_request(self, sender_id: str, receiver_id: str) -> ConnectionRequest:
        """
        Send a connection request, or return the one already pending.

        Raises:
            SelfRelationError: If sender_id == receiver_id
            ProfileNotFoundError: If the receiver doesn't exist
            AlreadyConnectedError: If the users are already connected
            ConnectionsNotAllowedError: If the receiver refuses requests
        """
        ...

    async def list_received(self, user_id: str) -> list[ConnectionRequestWithSender]:
        """Pending requests addressed to the user, with sender cards."""
        ...

    async def list_sent(self, user_id: str) -> list[ConnectionRequest]:
        """Pending requests sent by the user."""
        ...

    async def list_connections(self, user_id: str) -> list[ProfileSummary]:
        ...

    async def accept_request(self, request_id: str, user_id: str) -> None:
        """
        Accept a pending request addressed to ``user_id``.

        Raises:
            ConnectionRequestNotFoundError: If the request doesn't exist
            ConnectionRequestAccessDeniedError: If user_id is not the receiver
            RequestNotPendingError: If the request was already answered
        """
        ...

    async def reject_request(self, request_id: str, user_id: str) -> None:
        ...
