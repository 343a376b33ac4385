"""Tests for the media upload endpoint."""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_media_service
from api.middleware.auth import get_current_user
from modules.media.exceptions import MediaUploadError
from modules.media.models import MediaItem, MediaType


@pytest.fixture
def service():
    return AsyncMock()


@pytest.fixture
def client(service, current_user):
    app = create_app()
    app.dependency_overrides[get_current_user] = lambda: current_user
    app.dependency_overrides[get_media_service] = lambda: service
    return TestClient(app)


class TestUploadMedia:
    def test_upload_passes_raw_body(self, client, service):
        service.upload.return_value = MediaItem(
            id="abc", type=MediaType.IMAGE, url="https://res.cloudinary.com/demo/abc.jpg"
        )
        response = client.post(
            "/api/media",
            params={"filename": "photo.jpg"},
            content=b"\x89PNG",
            headers={"Content-Type": "image/png"},
        )
        assert response.status_code == 201
        assert response.json()["id"] == "abc"
        service.upload.assert_awaited_once_with("photo.jpg", "image/png", b"\x89PNG")

    def test_filename_required(self, client):
        response = client.post("/api/media", content=b"x")
        assert response.status_code == 422

    def test_gateway_failure_is_bad_gateway(self, client, service):
        service.upload.side_effect = MediaUploadError("timeout")
        response = client.post("/api/media", params={"filename": "a.jpg"}, content=b"x")
        assert response.status_code == 502
        assert response.json()["error"] == "MEDIA_UPLOAD_FAILED"
