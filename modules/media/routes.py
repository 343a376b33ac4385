"""
Media upload endpoint.

The request body is the raw file; the file name is passed as a query
parameter and the type is taken from the Content-Type header.
"""

from fastapi import APIRouter, Depends, Query, Request

from api.middleware.auth import get_current_user
from api.dependencies import get_media_service
from shared.models import AuthenticatedUser

from .interfaces import IMediaService
from .models import MediaItem

router = APIRouter()


@router.post("", response_model=MediaItem, status_code=201)
async def upload_media(
    request: Request,
    filename: str = Query(..., min_length=1, max_length=255),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IMediaService = Depends(get_media_service),
) -> MediaItem:
    """Upload an image or video and return the hosted media item."""
    content = await request.body()
    content_type = request.headers.get("content-type", "application/octet-stream")
    return await service.upload(filename, content_type, content)
