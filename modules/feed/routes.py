"""
Feed API endpoint.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_feed_service
from shared.models import AuthenticatedUser

from .interfaces import IFeedService
from .models import FeedResponse

router = APIRouter()


@router.get("", response_model=FeedResponse)
async def get_feed(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFeedService = Depends(get_feed_service),
) -> FeedResponse:
    """Home feed for the current user."""
    return await service.get_feed(user.id)
