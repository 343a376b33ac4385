"""
Cloudinary media service.

Uploads go through an unsigned upload preset; deletes are signed with the
API secret.
"""

import hashlib
import logging
import time
from typing import Optional
from urllib.parse import urlparse

import httpx

from shared.config import Settings, get_settings
from shared.exceptions import ExternalServiceError

from .interfaces import IMediaService
from .models import MediaItem, MediaType
from .exceptions import (
    EmptyUploadError,
    MediaDeleteError,
    MediaNotConfiguredError,
    MediaUploadError,
)

logger = logging.getLogger(__name__)

CLOUDINARY_API_URL = "https://api.cloudinary.com/v1_1"
CLOUDINARY_HOST = "cloudinary.com"


def public_id_from_url(url: str) -> Optional[str]:
    """
    Derive the public id from a delivery URL (last path segment, no extension).

    Returns None for URLs that are not hosted on the CDN.
    """
    if not url or CLOUDINARY_HOST not in url:
        return None
    segment = urlparse(url).path.rstrip("/").split("/")[-1]
    public_id = segment.rsplit(".", 1)[0]
    return public_id or None


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Cloudinary request signature: SHA-1 of sorted params plus secret."""
    to_sign = "&".join(f"{k}={params[k]}" for k in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode()).hexdigest()


class MediaService(IMediaService):
    """Media CDN client using httpx."""

    def __init__(self, settings: Optional[Settings] = None, timeout: float = 60.0):
        self._settings = settings or get_settings()
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.cloudinary_cloud_name)

    def _url(self, path: str) -> str:
        return f"{CLOUDINARY_API_URL}/{self._settings.cloudinary_cloud_name}/{path}"

    async def upload(self, filename: str, content_type: str, content: bytes) -> MediaItem:
        if not self.is_configured:
            raise MediaNotConfiguredError()
        if not content:
            raise EmptyUploadError()

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self._url("auto/upload"),
                    data={"upload_preset": self._settings.cloudinary_upload_preset},
                    files={"file": (filename, content, content_type)},
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            raise MediaUploadError(str(e))

        if response.status_code >= 400:
            raise MediaUploadError(response.text, status_code=response.status_code)

        data = response.json()
        item = MediaItem(
            id=data["public_id"],
            type=MediaType.IMAGE if data.get("resource_type") == "image" else MediaType.VIDEO,
            url=data["secure_url"],
            path=data["public_id"],
            filename=filename,
        )
        logger.info(f"Uploaded {filename} as {item.id}")
        return item

    async def destroy(self, public_id: str, resource_type: str = "image") -> None:
        if not self.is_configured:
            raise MediaNotConfiguredError()

        params = {"public_id": public_id, "timestamp": str(int(time.time()))}
        body = {
            **params,
            "api_key": self._settings.cloudinary_api_key,
            "signature": sign_params(params, self._settings.cloudinary_api_secret),
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self._url(f"{resource_type}/destroy"),
                    data=body,
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            raise MediaDeleteError(public_id, str(e))

        if response.status_code >= 400:
            raise MediaDeleteError(public_id, response.text)

    async def destroy_item(self, item: MediaItem) -> bool:
        """Best-effort delete of a stored media item."""
        public_id = item.path or public_id_from_url(item.url)
        if not public_id or CLOUDINARY_HOST not in item.url:
            return False
        try:
            await self.destroy(public_id, resource_type=item.type.value)
            return True
        except ExternalServiceError as e:
            logger.warning(f"Continuing after media delete failure: {e.message}")
            return False

    async def destroy_url(self, url: Optional[str]) -> bool:
        public_id = public_id_from_url(url or "")
        if not public_id:
            return False
        try:
            await self.destroy(public_id)
            return True
        except ExternalServiceError as e:
            logger.warning(f"Continuing after media delete failure: {e.message}")
            return False
