"""
Posts module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import (
    Comment,
    CreatePostRequest,
    Post,
    PostWithAuthor,
    ProfilePostsResponse,
    ReactionType,
    Report,
    UpdatePostRequest,
)


@runtime_checkable
class IPostService(Protocol):
    """
    Interface for post operations.

    Ownership rules: only the author edits or deletes a post, only the
    commenter edits or deletes a comment. Each user holds at most one
    reaction per post.
    """

    async def create_post(self, author_id: str, request: CreatePostRequest) -> Post:
        """Create a post, extracting mentions and hashtags from its text."""
        ...

    async def get_post(self, post_id: str, viewer_id: Optional[str]) -> Optional[PostWithAuthor]:
        """
        Get a post joined with its author.

        Returns None if the post or its author no longer exists.

        Raises:
            PostAccessDeniedError: If the viewer may not see the post
        """
        ...

    async def update_post(self, post_id: str, user_id: str, updates: UpdatePostRequest) -> Post:
        """
        Raises:
            PostNotFoundError: If the post doesn't exist
            PostAccessDeniedError: If user_id is not the author
        """
        ...

    async def delete_post(self, post_id: str, user_id: str) -> None:
        """
        Delete a post and, best-effort, its CDN media.

        Raises:
            PostNotFoundError: If the post doesn't exist
            PostAccessDeniedError: If user_id is not the author
        """
        ...

    async def delete_posts_by_author(self, author_id: str) -> int:
        """Delete every post of an author. Returns how many were deleted."""
        ...

    async def add_comment(self, post_id: str, user_id: str, content: str) -> Comment:
        ...

    async def update_comment(
        self,
        post_id: str,
        comment_id: str,
        user_id: str,
        content: str,
    ) -> Comment:
        ...

    async def delete_comment(self, post_id: str, comment_id: str, user_id: str) -> None:
        ...

    async def add_reaction(self, post_id: str, user_id: str, reaction_type: ReactionType) -> Post:
        """Set the user's reaction, replacing an existing one."""
        ...

    async def remove_reaction(self, post_id: str, user_id: str) -> Post:
        ...

    async def toggle_reaction(self, post_id: str, user_id: str, reaction_type: ReactionType) -> Post:
        """Remove the reaction if it has this type, otherwise set it."""
        ...

    async def share_post(self, post_id: str, user_id: str) -> int:
        """Increment the share counter. Returns the new count."""
        ...

    async def report_post(self, post_id: str, reporter_id: str, reason: str) -> Report:
        ...

    async def list_profile_posts(
        self,
        author_id: str,
        viewer_id: Optional[str],
        cursor: Optional[str] = None,
    ) -> ProfilePostsResponse:
        """
        One page of an author's posts visible to the viewer.

        Raises:
            InvalidCursorError: If the cursor cannot be decoded
        """
        ...
