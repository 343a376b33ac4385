"""
Media module.

Uploads and deletes post media, avatars and verification documents on
the Cloudinary CDN.
"""

from .interfaces import IMediaService
from .models import MediaItem, MediaType
from .exceptions import MediaUploadError, MediaDeleteError, MediaNotConfiguredError

__all__ = [
    "IMediaService",
    "MediaItem",
    "MediaType",
    "MediaUploadError",
    "MediaDeleteError",
    "MediaNotConfiguredError",
]
