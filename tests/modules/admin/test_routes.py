"""Tests for admin API endpoints."""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_admin_service, get_profile_service, get_verification_service
from api.middleware.auth import get_current_user
from modules.admin.exceptions import ReportNotFoundError
from modules.admin.models import AdminStats, UserPage
from modules.verification.exceptions import VerificationRequestNotFoundError
from modules.verification.models import ReviewStatus, VerificationRequest
from modules.profiles.models import UserRole
from tests.conftest import make_profile


@pytest.fixture
def admin_service():
    return AsyncMock()


@pytest.fixture
def verification_service():
    return AsyncMock()


@pytest.fixture
def profile_service(test_user_id):
    mock = AsyncMock()
    mock.get_profile.return_value = make_profile(test_user_id, is_admin=True)
    return mock


@pytest.fixture
def client(admin_service, verification_service, profile_service, current_user):
    app = create_app()
    app.dependency_overrides[get_current_user] = lambda: current_user
    app.dependency_overrides[get_admin_service] = lambda: admin_service
    app.dependency_overrides[get_verification_service] = lambda: verification_service
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    return TestClient(app)


class TestAdminAccess:
    def test_non_admin_is_forbidden(self, client, profile_service, admin_service, test_user_id):
        profile_service.get_profile.return_value = make_profile(test_user_id)
        assert client.get("/api/admin/stats").status_code == 403
        admin_service.get_stats.assert_not_awaited()

    def test_user_without_profile_is_forbidden(self, client, profile_service):
        profile_service.get_profile.return_value = None
        assert client.get("/api/admin/users").status_code == 403

    def test_requires_authentication(self):
        client = TestClient(create_app())
        assert client.get("/api/admin/stats").status_code == 401


class TestAdminRoutes:
    def test_stats(self, client, admin_service):
        admin_service.get_stats.return_value = AdminStats(total_users=3)
        response = client.get("/api/admin/stats")
        assert response.status_code == 200
        assert response.json()["total_users"] == 3

    def test_list_users(self, client, admin_service):
        admin_service.list_users.return_value = UserPage(items=[make_profile("u1")])
        response = client.get("/api/admin/users", params={"cursor": "abc", "page_size": 5})
        assert response.status_code == 200
        assert response.json()["items"][0]["id"] == "u1"
        admin_service.list_users.assert_awaited_once_with("abc", 5)

    def test_update_user(self, client, admin_service):
        admin_service.update_user_status.return_value = make_profile("u1", is_verified=True)
        response = client.patch("/api/admin/users/u1", json={"is_verified": True})
        assert response.status_code == 200
        admin_service.update_user_status.assert_awaited_once_with("u1", True, None)

    def test_delete_user(self, client, admin_service):
        assert client.delete("/api/admin/users/u1").status_code == 204
        admin_service.delete_user.assert_awaited_once_with("u1")

    def test_resolve_unknown_report(self, client, admin_service):
        admin_service.resolve_report.side_effect = ReportNotFoundError("r1")
        response = client.post("/api/admin/reports/r1/resolve", json={"resolution": "approve"})
        assert response.status_code == 404

    def test_resolve_rejects_unknown_resolution(self, client):
        response = client.post("/api/admin/reports/r1/resolve", json={"resolution": "ignore"})
        assert response.status_code == 422


class TestVerificationReview:
    def test_pending(self, client, verification_service):
        verification_service.list_pending.return_value = []
        response = client.get("/api/admin/verifications/pending", params={"limit": 5})
        assert response.json() == {"requests": []}
        verification_service.list_pending.assert_awaited_once_with(5)

    def test_review(self, client, verification_service, test_user_id):
        verification_service.review_request.return_value = VerificationRequest(
            id="v1", user_id="u1", role=UserRole.ATHLETE, status=ReviewStatus.APPROVED
        )
        response = client.post(
            "/api/admin/verifications/v1/review", json={"decision": "approved", "notes": "ok"}
        )
        assert response.status_code == 200
        verification_service.review_request.assert_awaited_once_with(
            "v1", test_user_id, "approved", "ok"
        )

    def test_review_missing(self, client, verification_service):
        verification_service.review_request.side_effect = VerificationRequestNotFoundError("v1")
        response = client.post("/api/admin/verifications/v1/review", json={"decision": "rejected"})
        assert response.status_code == 404
