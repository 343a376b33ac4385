"""Tests for the application factory and domain error mapping."""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app, status_for
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    SportFwdError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error, expected",
    [
        (NotFoundError("missing"), 404),
        (ValidationError("bad"), 422),
        (AuthenticationError("who"), 401),
        (AuthorizationError("no"), 403),
        (ConflictError("again"), 409),
        (ExternalServiceError("down", service="cloudinary"), 502),
        (SportFwdError("boom"), 500),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


def test_error_body_is_the_error_dict():
    app = create_app()

    @app.get("/boom")
    async def boom():
        raise ExternalServiceError("gateway down", service="twilio", code="SMS_GATEWAY_ERROR")

    response = TestClient(app).get("/boom")

    assert response.status_code == 502
    assert response.json() == {
        "error": "SMS_GATEWAY_ERROR",
        "message": "gateway down",
        "details": {"service": "twilio"},
    }


def test_all_routers_are_mounted():
    paths = {route.path for route in create_app().routes}
    for prefix in [
        "/api/health",
        "/api/users/me",
        "/api/profiles/me",
        "/api/posts",
        "/api/feed",
        "/api/connections",
        "/api/notifications",
        "/api/conversations",
        "/api/messages",
        "/api/groups",
        "/api/events",
        "/api/profiles/me/presence",
        "/api/verification/status",
        "/api/admin/stats",
    ]:
        assert prefix in paths
