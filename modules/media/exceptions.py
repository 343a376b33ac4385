"""
Media module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError, ValidationError


class MediaUploadError(ExternalServiceError):
    """Raised when the CDN rejects or fails an upload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            f"Failed to upload media: {message}",
            service="cloudinary",
            code="MEDIA_UPLOAD_FAILED",
            details={"status_code": status_code},
        )


class MediaDeleteError(ExternalServiceError):
    """Raised when the CDN fails to destroy an asset."""

    def __init__(self, public_id: str, message: str):
        super().__init__(
            f"Failed to delete media {public_id}: {message}",
            service="cloudinary",
            code="MEDIA_DELETE_FAILED",
            details={"public_id": public_id},
        )


class MediaNotConfiguredError(ExternalServiceError):
    def __init__(self):
        super().__init__(
            "Media CDN is not configured",
            service="cloudinary",
            code="MEDIA_NOT_CONFIGURED",
        )


class EmptyUploadError(ValidationError):
    def __init__(self):
        super().__init__("Uploaded file is empty", code="EMPTY_UPLOAD")
