"""Tests for notification API endpoints."""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_notification_service
from api.middleware.auth import get_current_user
from modules.notifications.exceptions import (
    NotificationAccessDeniedError,
    NotificationNotFoundError,
)
from modules.notifications.models import NotificationType, NotificationWithSender


@pytest.fixture
def service():
    return AsyncMock()


@pytest.fixture
def client(service, current_user):
    app = create_app()
    app.dependency_overrides[get_current_user] = lambda: current_user
    app.dependency_overrides[get_notification_service] = lambda: service
    return TestClient(app)


class TestNotificationRoutes:
    def test_list(self, client, service, test_user_id):
        service.list_notifications.return_value = [
            NotificationWithSender(id="n1", user_id=test_user_id, type=NotificationType.NEW_MESSAGE)
        ]
        service.unread_count.return_value = 1

        response = client.get("/api/notifications", params={"limit": 5})

        assert response.status_code == 200
        data = response.json()
        assert data["unread_count"] == 1
        assert data["notifications"][0]["type"] == "new_message"
        service.list_notifications.assert_awaited_once_with(test_user_id, 5)

    def test_unread_count(self, client, service):
        service.unread_count.return_value = 3
        assert client.get("/api/notifications/unread-count").json() == {"unread_count": 3}

    def test_read_all(self, client, service, test_user_id):
        assert client.post("/api/notifications/read-all").status_code == 204
        service.mark_all_read.assert_awaited_once_with(test_user_id)

    def test_mark_read(self, client, service, test_user_id):
        assert client.post("/api/notifications/n1/read").status_code == 204
        service.mark_read.assert_awaited_once_with("n1", test_user_id)

    @pytest.mark.parametrize("error", [
        NotificationNotFoundError("n1"),
        NotificationAccessDeniedError("n1", "test-user-123"),
    ])
    def test_mark_read_hides_other_users(self, client, service, error):
        service.mark_read.side_effect = error
        assert client.post("/api/notifications/n1/read").status_code == 404
