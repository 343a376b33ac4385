"""
Posts service implementation.

All reaction edits go through the list rules in ``rules.py`` so the
one-reaction-per-user invariant holds no matter which endpoint is used.
"""

import logging
import uuid
from typing import Optional, TYPE_CHECKING

from shared.config import Settings, get_settings
from shared.pagination import decode_cursor, encode_cursor
from modules.notifications.models import NotificationType
from modules.profiles.models import Profile, ProfileSummary
from modules.profiles.repository import ProfileRepository

from .interfaces import IPostService
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
from .repository import PostRepository, ReportRepository
from .rules import (
    can_view,
    extract_hashtags,
    extract_mentions,
    find_reaction,
    toggled_reaction,
    visible_scopes,
    with_reaction,
    without_reaction,
)
from .exceptions import (
    CommentAccessDeniedError,
    CommentNotFoundError,
    InvalidCursorError,
    PostAccessDeniedError,
    PostNotFoundError,
)

if TYPE_CHECKING:
    from modules.media.interfaces import IMediaService
    from modules.notifications.interfaces import INotificationService

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """Post service backed by Supabase."""

    def __init__(
        self,
        repository: PostRepository,
        profiles: ProfileRepository,
        reports: ReportRepository,
        media: Optional["IMediaService"] = None,
        notifications: Optional["INotificationService"] = None,
        settings: Optional[Settings] = None,
    ):
        self._repo = repository
        self._profiles = profiles
        self._reports = reports
        self._media = media
        self._notifications = notifications
        self._settings = settings or get_settings()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require_post(self, post_id: str) -> Post:
        post = self._repo.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def _require_author(self, post_id: str, user_id: str) -> Post:
        post = self._require_post(post_id)
        if post.author_id != user_id:
            raise PostAccessDeniedError(post_id, user_id)
        return post

    def _viewer(self, viewer_id: Optional[str]) -> Optional[Profile]:
        return self._profiles.get_by_id(viewer_id) if viewer_id else None

    def _require_visible(self, post_id: str, viewer_id: str) -> Post:
        """Load a post the viewer may see; hidden posts read as missing."""
        post = self._require_post(post_id)
        if not can_view(post, self._viewer(viewer_id)):
            raise PostNotFoundError(post_id)
        return post

    async def _notify_author(
        self,
        post: Post,
        actor_id: str,
        type: NotificationType,
        title: str,
        verb: str,
        comment_id: Optional[str] = None,
    ) -> None:
        if self._notifications is None or actor_id == post.author_id:
            return
        actor = self._profiles.get_by_id(actor_id)
        name = actor.display_name if actor and actor.display_name else "Someone"
        await self._notifications.create_notification(
            post.author_id,
            type,
            title,
            f"{name} {verb}",
            sender_id=actor_id,
            post_id=post.id,
            comment_id=comment_id,
        )

    async def _destroy_media(self, post: Post) -> None:
        if self._media is None:
            return
        for item in post.media:
            await self._media.destroy_item(item)

    # -------------------------------------------------------------------------
    # Posts
    # -------------------------------------------------------------------------

    async def create_post(self, author_id: str, request: CreatePostRequest) -> Post:
        post = self._repo.create({
            "author_id": author_id,
            "content": request.content,
            "media": [m.model_dump(mode="json") for m in request.media],
            "reactions": [],
            "comments": [],
            "visibility": request.visibility.value,
            "tags": request.tags,
            "mentions": extract_mentions(request.content),
            "hashtags": extract_hashtags(request.content),
            "is_edited": False,
            "shares": 0,
        })
        logger.info(f"Created post {post.id} by {author_id}")
        return post

    async def get_post(self, post_id: str, viewer_id: Optional[str]) -> Optional[PostWithAuthor]:
        post = self._repo.get_by_id(post_id)
        if post is None:
            return None
        if not can_view(post, self._viewer(viewer_id)):
            raise PostAccessDeniedError(post_id, viewer_id or "")

        author = self._profiles.get_by_id(post.author_id)
        if author is None:
            return None
        return PostWithAuthor(**post.model_dump(), author=ProfileSummary.from_profile(author))

    async def update_post(self, post_id: str, user_id: str, updates: UpdatePostRequest) -> Post:
        post = self._require_author(post_id, user_id)

        data: dict = {"is_edited": True}
        if updates.content is not None:
            data["content"] = updates.content
            data["mentions"] = extract_mentions(updates.content)
            data["hashtags"] = extract_hashtags(updates.content)
        if updates.visibility is not None:
            data["visibility"] = updates.visibility.value
        if updates.tags is not None:
            data["tags"] = updates.tags
        if updates.media is not None:
            removed = set(updates.media.remove)
            kept = [m for m in post.media if m.id not in removed]
            data["media"] = [m.model_dump(mode="json") for m in kept + updates.media.add]

        updated = self._repo.update(post_id, data)
        if updated is None:
            raise PostNotFoundError(post_id)
        return updated

    async def delete_post(self, post_id: str, user_id: str) -> None:
        post = self._require_author(post_id, user_id)
        await self._destroy_media(post)
        self._repo.delete(post_id)
        logger.info(f"Deleted post {post_id}")

    async def delete_posts_by_author(self, author_id: str) -> int:
        posts = self._repo.list_by_author(author_id)
        for post in posts:
            await self._destroy_media(post)
            self._repo.delete(post.id)
        return len(posts)

    async def share_post(self, post_id: str, user_id: str) -> int:
        self._require_visible(post_id, user_id)
        return self._repo.increment_shares(post_id)

    async def report_post(self, post_id: str, reporter_id: str, reason: str) -> Report:
        self._require_visible(post_id, reporter_id)
        report = self._reports.create(reporter_id, post_id, reason)
        logger.info(f"Post {post_id} reported by {reporter_id}")
        return report

    # -------------------------------------------------------------------------
    # Comments
    # -------------------------------------------------------------------------

    async def add_comment(self, post_id: str, user_id: str, content: str) -> Comment:
        post = self._require_visible(post_id, user_id)
        comment = Comment(id=str(uuid.uuid4()), user_id=user_id, content=content)
        self._repo.save_comments(post_id, post.comments + [comment])
        await self._notify_author(
            post,
            user_id,
            NotificationType.POST_COMMENT,
            "New comment",
            "commented on your post",
            comment_id=comment.id,
        )
        return comment

    def _require_own_comment(self, post: Post, comment_id: str, user_id: str) -> Comment:
        comment = next((c for c in post.comments if c.id == comment_id), None)
        if comment is None:
            raise CommentNotFoundError(post.id, comment_id)
        if comment.user_id != user_id:
            raise CommentAccessDeniedError(comment_id, user_id)
        return comment

    async def update_comment(
        self,
        post_id: str,
        comment_id: str,
        user_id: str,
        content: str,
    ) -> Comment:
        post = self._require_visible(post_id, user_id)
        comment = self._require_own_comment(post, comment_id, user_id)

        edited = comment.model_copy(update={"content": content, "is_edited": True})
        comments = [edited if c.id == comment_id else c for c in post.comments]
        self._repo.save_comments(post_id, comments)
        return edited

    async def delete_comment(self, post_id: str, comment_id: str, user_id: str) -> None:
        post = self._require_visible(post_id, user_id)
        self._require_own_comment(post, comment_id, user_id)
        self._repo.save_comments(post_id, [c for c in post.comments if c.id != comment_id])

    # -------------------------------------------------------------------------
    # Reactions
    # -------------------------------------------------------------------------

    async def _apply_reactions(self, post: Post, reactions: list) -> Post:
        updated = self._repo.save_reactions(post.id, reactions)
        return updated or post.model_copy(update={"reactions": reactions})

    async def _notify_if_new(self, post: Post, user_id: str, reacted: Post) -> None:
        if find_reaction(post.reactions, user_id) is None and find_reaction(
            reacted.reactions, user_id
        ) is not None:
            await self._notify_author(
                post, user_id, NotificationType.POST_LIKE, "New reaction", "reacted to your post"
            )

    async def add_reaction(self, post_id: str, user_id: str, reaction_type: ReactionType) -> Post:
        post = self._require_visible(post_id, user_id)
        reacted = await self._apply_reactions(
            post, with_reaction(post.reactions, user_id, reaction_type)
        )
        await self._notify_if_new(post, user_id, reacted)
        return reacted

    async def remove_reaction(self, post_id: str, user_id: str) -> Post:
        post = self._require_visible(post_id, user_id)
        return await self._apply_reactions(post, without_reaction(post.reactions, user_id))

    async def toggle_reaction(self, post_id: str, user_id: str, reaction_type: ReactionType) -> Post:
        post = self._require_visible(post_id, user_id)
        reacted = await self._apply_reactions(
            post, toggled_reaction(post.reactions, user_id, reaction_type)
        )
        await self._notify_if_new(post, user_id, reacted)
        return reacted

    # -------------------------------------------------------------------------
    # Profile timeline
    # -------------------------------------------------------------------------

    async def list_profile_posts(
        self,
        author_id: str,
        viewer_id: Optional[str],
        cursor: Optional[str] = None,
    ) -> ProfilePostsResponse:
        try:
            after = decode_cursor(cursor)
        except ValueError:
            raise InvalidCursorError(cursor or "")

        author = self._profiles.get_by_id(author_id)
        if author is None:
            return ProfilePostsResponse(posts=[])

        page_size = self._settings.profile_posts_page_size
        allowed = sorted(visible_scopes(author_id, self._viewer(viewer_id)), key=lambda v: v.value)
        rows = self._repo.list_by_author(
            author_id, limit=page_size + 1, after=after, visibilities=allowed
        )

        has_more = len(rows) > page_size
        rows = rows[:page_size]
        summary = ProfileSummary.from_profile(author)
        posts = [PostWithAuthor(**p.model_dump(), author=summary) for p in rows]
        next_cursor = encode_cursor(rows[-1].created_at, rows[-1].id) if has_more else None
        return ProfilePostsResponse(posts=posts, next_cursor=next_cursor, has_more=has_more)
