"""
Media module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import MediaItem


@runtime_checkable
class IMediaService(Protocol):
    """Upload and delete files on the media CDN."""

    async def upload(self, filename: str, content_type: str, content: bytes) -> MediaItem:
        """
        Upload a file.

        Raises:
            MediaUploadError: If the CDN call fails
        """
        ...

    async def destroy(self, public_id: str, resource_type: str = "image") -> None:
        """
        Delete an asset by public id.

        Raises:
            MediaDeleteError: If the CDN call fails
        """
        ...

    async def destroy_item(self, item: MediaItem) -> bool:
        """
        Best-effort delete of a stored media item. Failures are logged.

        Returns:
            True if the asset was deleted
        """
        ...

    async def destroy_url(self, url: Optional[str]) -> bool:
        """
        Best-effort delete of a CDN URL. Failures are logged, not raised.

        Returns:
            True if a delete was issued and succeeded
        """
        ...
