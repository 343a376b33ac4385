"""Tests for the connection request workflow."""

import pytest
from unittest.mock import AsyncMock, MagicMock, call

from modules.connections.exceptions import (
    AlreadyConnectedError,
    ConnectionRequestAccessDeniedError,
    ConnectionRequestNotFoundError,
    ConnectionsNotAllowedError,
    RequestNotPendingError,
)
from modules.connections.service import ConnectionService
from modules.notifications.models import Notification, NotificationType, RequestStatus
from modules.profiles.exceptions import ProfileNotFoundError, SelfRelationError
from modules.profiles.models import PrivacySettings
from tests.conftest import make_profile


def connection_request(
    request_id: str = "r1",
    sender_id: str = "alice",
    receiver_id: str = "bob",
    status: RequestStatus = RequestStatus.PENDING,
) -> Notification:
    return Notification(
        id=request_id,
        user_id=receiver_id,
        type=NotificationType.CONNECTION_REQUEST,
        sender_id=sender_id,
        status=status,
    )


@pytest.fixture
def people():
    return {"alice": make_profile("alice"), "bob": make_profile("bob")}


@pytest.fixture
def profiles(people):
    mock = MagicMock()
    mock.get_by_id.side_effect = lambda user_id: people.get(user_id)
    return mock


@pytest.fixture
def requests():
    mock = MagicMock()
    mock.find_connection_requests.return_value = []
    return mock


@pytest.fixture
def notifications():
    mock = AsyncMock()
    mock.create_notification.side_effect = lambda user_id, type, *args, **kwargs: Notification(
        id="new", user_id=user_id, type=type, sender_id=kwargs.get("sender_id"),
        status=kwargs.get("status"),
    )
    return mock


@pytest.fixture
def service(requests, profiles, notifications):
    return ConnectionService(requests, profiles, notifications)


class TestSendRequest:
    @pytest.mark.asyncio
    async def test_creates_pending_request(self, service, notifications):
        request = await service.send_request("alice", "bob")

        assert request.status == RequestStatus.PENDING
        args = notifications.create_notification.await_args
        assert args.args[0] == "bob"
        assert args.args[1] == NotificationType.CONNECTION_REQUEST
        assert args.args[3] == "Alice wants to connect with you"
        assert args.kwargs["sender_id"] == "alice"
        assert args.kwargs["status"] == "pending"

    @pytest.mark.asyncio
    async def test_self_request(self, service):
        with pytest.raises(SelfRelationError):
            await service.send_request("alice", "alice")

    @pytest.mark.asyncio
    async def test_unknown_receiver(self, service):
        with pytest.raises(ProfileNotFoundError):
            await service.send_request("alice", "nobody")

    @pytest.mark.asyncio
    async def test_already_connected(self, service, people):
        people["bob"] = make_profile("bob", connections=["alice"])
        with pytest.raises(AlreadyConnectedError):
            await service.send_request("alice", "bob")

    @pytest.mark.asyncio
    async def test_receiver_refuses_connections(self, service, people):
        people["bob"] = make_profile("bob", privacy=PrivacySettings(allow_connections=False))
        with pytest.raises(ConnectionsNotAllowedError):
            await service.send_request("alice", "bob")

    @pytest.mark.asyncio
    async def test_pending_request_is_reused(self, service, requests, notifications):
        existing = connection_request()
        requests.find_connection_requests.return_value = [existing]

        assert await service.send_request("alice", "bob") is existing
        notifications.create_notification.assert_not_awaited()


class TestAnswerRequest:
    @pytest.mark.asyncio
    async def test_accept_connects_both_sides(self, service, requests, profiles, notifications):
        requests.get_by_id.return_value = connection_request()

        await service.accept_request("r1", "bob")

        assert profiles.add_to_list.call_args_list == [
            call("bob", "connections", "alice"),
            call("alice", "connections", "bob"),
        ]
        requests.update_status.assert_called_once_with("r1", RequestStatus.ACCEPTED)
        args = notifications.create_notification.await_args
        assert args.args[0] == "alice"
        assert args.args[1] == NotificationType.CONNECTION_ACCEPTED
        assert args.kwargs["sender_id"] == "bob"

    @pytest.mark.asyncio
    async def test_accept_settles_reverse_request(self, service, requests):
        requests.get_by_id.return_value = connection_request()
        requests.find_connection_requests.return_value = [
            connection_request("r2", sender_id="bob", receiver_id="alice")
        ]

        await service.accept_request("r1", "bob")

        requests.find_connection_requests.assert_called_once_with(
            sender_id="bob", receiver_id="alice", status=RequestStatus.PENDING
        )
        assert requests.update_status.call_args_list == [
            call("r1", RequestStatus.ACCEPTED),
            call("r2", RequestStatus.ACCEPTED),
        ]

    @pytest.mark.asyncio
    async def test_only_receiver_may_accept(self, service, requests, profiles):
        requests.get_by_id.return_value = connection_request()
        with pytest.raises(ConnectionRequestAccessDeniedError):
            await service.accept_request("r1", "alice")
        profiles.add_to_list.assert_not_called()

    @pytest.mark.asyncio
    async def test_answered_request_cannot_be_accepted(self, service, requests):
        requests.get_by_id.return_value = connection_request(status=RequestStatus.REJECTED)
        with pytest.raises(RequestNotPendingError):
            await service.accept_request("r1", "bob")

    @pytest.mark.asyncio
    async def test_other_notification_types_are_not_requests(self, service, requests):
        requests.get_by_id.return_value = Notification(
            id="r1", user_id="bob", type=NotificationType.POST_LIKE
        )
        with pytest.raises(ConnectionRequestNotFoundError):
            await service.reject_request("r1", "bob")

    @pytest.mark.asyncio
    async def test_reject(self, service, requests, profiles, notifications):
        requests.get_by_id.return_value = connection_request()

        await service.reject_request("r1", "bob")

        requests.update_status.assert_called_once_with("r1", RequestStatus.REJECTED)
        profiles.add_to_list.assert_not_called()
        notifications.create_notification.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_request(self, service, requests):
        requests.get_by_id.return_value = None
        with pytest.raises(ConnectionRequestNotFoundError):
            await service.accept_request("r1", "bob")

    @pytest.mark.asyncio
    async def test_request_without_sender_is_not_accepted(
        self, service, requests, profiles, notifications
    ):
        requests.get_by_id.return_value = Notification(
            id="r1",
            user_id="bob",
            type=NotificationType.CONNECTION_REQUEST,
            status=RequestStatus.PENDING,
        )

        with pytest.raises(ConnectionRequestNotFoundError):
            await service.accept_request("r1", "bob")

        profiles.add_to_list.assert_not_called()
        requests.update_status.assert_not_called()
        notifications.create_notification.assert_not_awaited()


class TestListings:
    @pytest.mark.asyncio
    async def test_received_attaches_senders(self, service, requests):
        requests.find_connection_requests.return_value = [connection_request()]

        received = await service.list_received("bob")

        assert received[0].sender.display_name == "Alice"
        requests.find_connection_requests.assert_called_once_with(
            receiver_id="bob", status=RequestStatus.PENDING
        )

    @pytest.mark.asyncio
    async def test_sent(self, service, requests):
        requests.find_connection_requests.return_value = [connection_request()]
        assert len(await service.list_sent("alice")) == 1
        requests.find_connection_requests.assert_called_once_with(
            sender_id="alice", status=RequestStatus.PENDING
        )

    @pytest.mark.asyncio
    async def test_connections_skip_deleted_profiles(self, service, people):
        people["alice"] = make_profile("alice", connections=["bob", "gone"])
        connections = await service.list_connections("alice")
        assert [c.id for c in connections] == ["bob"]

    @pytest.mark.asyncio
    async def test_connections_of_unknown_user(self, service):
        with pytest.raises(ProfileNotFoundError):
            await service.list_connections("nobody")
