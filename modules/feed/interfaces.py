"""
Feed module interface.
"""

from typing import Protocol, runtime_checkable

from .models import FeedResponse


@runtime_checkable
class IFeedService(Protocol):
    """Interface for the home feed."""

    async def get_feed(self, user_id: str) -> FeedResponse:
        """
        Build the user's home feed.

        Returns:
            At most one page of posts, newest first, each with its author.
            Other users' private posts are never included.

        Raises:
            Whatever a scope query or author lookup raises; there is no
            partial result.
        """
        ...
