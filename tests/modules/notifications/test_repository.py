"""Tests for the notification repository."""

import pytest
from unittest.mock import MagicMock, call

from modules.notifications.models import NotificationType, RequestStatus
from modules.notifications.repository import NotificationRepository


@pytest.fixture
def db():
    return MagicMock()


@pytest.fixture
def repo(db):
    return NotificationRepository(db)


ROW = {
    "id": "n1",
    "user_id": "bob",
    "type": "connection_request",
    "title": "Connection request",
    "content": None,
    "read": False,
    "sender_id": "alice",
    "status": "pending",
    "created_at": "2024-06-01T12:00:00+00:00",
}


class TestNotificationRepository:
    def test_create_defaults_unread(self, repo, db):
        db.table.return_value.insert.return_value.execute.return_value.data = [ROW]

        notification = repo.create({"user_id": "bob", "type": "connection_request"})

        payload = db.table.return_value.insert.call_args.args[0]
        assert payload["read"] is False
        assert "created_at" in payload
        assert notification.type == NotificationType.CONNECTION_REQUEST
        assert notification.status == RequestStatus.PENDING
        assert notification.content == ""

    def test_list_for_user_newest_first(self, repo, db):
        chain = db.table.return_value.select.return_value.eq.return_value.order.return_value
        chain.limit.return_value.execute.return_value.data = [ROW]

        result = repo.list_for_user("bob", limit=10)

        db.table.return_value.select.return_value.eq.return_value.order.assert_called_once_with(
            "created_at", desc=True
        )
        assert [n.id for n in result] == ["n1"]

    def test_count_unread(self, repo, db):
        db.table.return_value.select.return_value.eq.return_value.eq.return_value.execute.return_value.count = None
        assert repo.count_unread("bob") == 0

    def test_delete_for_user_removes_sent_and_received(self, repo, db):
        repo.delete_for_user("alice")
        assert db.table.return_value.delete.return_value.eq.call_args_list == [
            call("user_id", "alice"),
            call("sender_id", "alice"),
        ]

    def test_find_connection_requests_filters(self, repo, db):
        chain = db.table.return_value.select.return_value
        chain.eq.return_value.eq.return_value.eq.return_value.eq.return_value.order.return_value.execute.return_value.data = [ROW]

        result = repo.find_connection_requests("alice", "bob", RequestStatus.PENDING)

        chain.eq.assert_called_once_with("type", "connection_request")
        assert result[0].sender_id == "alice"

    def test_update_status_marks_read(self, repo, db):
        repo.update_status("n1", RequestStatus.ACCEPTED)
        payload = db.table.return_value.update.call_args.args[0]
        assert payload["status"] == "accepted"
        assert payload["read"] is True
