"""
Home feed assembly.

The feed is the union of four scoped queries (own posts, public posts,
followers-only posts of followed users, connections-only posts of
connections), deduplicated, joined with authors and truncated to a page.
"""

import asyncio
import logging
from functools import partial
from typing import Callable, Optional

from shared.concurrency import fan_out, merge_by_id
from shared.config import Settings, get_settings
from modules.posts.models import Post, PostVisibility, PostWithAuthor
from modules.posts.repository import PostRepository
from modules.profiles.models import Profile, ProfileSummary
from modules.profiles.repository import ProfileRepository

from .interfaces import IFeedService
from .models import FeedResponse, FeedScope

logger = logging.getLogger(__name__)


def scope_queries(
    posts: PostRepository,
    user_id: str,
    profile: Optional[Profile],
    page_size: int,
    scope_limit: int,
) -> list[tuple[FeedScope, Callable[[], list[Post]]]]:
    """
    Build the scoped queries in merge-priority order.

    Only the first ``scope_limit`` ids of the following and connection
    lists are queried. Scopes whose id list is empty are omitted.
    """
    following = profile.following[:scope_limit] if profile else []
    connections = profile.connections[:scope_limit] if profile else []

    queries: list[tuple[FeedScope, Callable[[], list[Post]]]] = [
        (FeedScope.OWN, partial(posts.fetch_scope, page_size, author_id=user_id)),
        (FeedScope.PUBLIC, partial(posts.fetch_scope, page_size, visibility=PostVisibility.PUBLIC)),
    ]
    if following:
        queries.append((
            FeedScope.FOLLOWERS,
            partial(
                posts.fetch_scope,
                page_size,
                visibility=PostVisibility.FOLLOWERS,
                author_ids=following,
            ),
        ))
    if connections:
        queries.append((
            FeedScope.CONNECTIONS,
            partial(
                posts.fetch_scope,
                page_size,
                visibility=PostVisibility.CONNECTIONS,
                author_ids=connections,
            ),
        ))
    return queries


def newest_first(posts: list[PostWithAuthor]) -> list[PostWithAuthor]:
    """Sort by creation time descending; ties broken by id descending."""
    return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)


class FeedService(IFeedService):
    """Feed service backed by the posts and profiles tables."""

    def __init__(
        self,
        posts: PostRepository,
        profiles: ProfileRepository,
        settings: Optional[Settings] = None,
    ):
        self._posts = posts
        self._profiles = profiles
        self._settings = settings or get_settings()

    async def get_feed(self, user_id: str) -> FeedResponse:
        page_size = self._settings.feed_page_size
        profile = await asyncio.to_thread(self._profiles.get_by_id, user_id)

        queries = scope_queries(
            self._posts, user_id, profile, page_size, self._settings.feed_scope_limit
        )
        groups = await fan_out(*(query for _, query in queries))
        for (scope, _), group in zip(queries, groups):
            logger.debug(f"Feed scope {scope.value} for {user_id}: {len(group)} posts")

        merged = merge_by_id(groups)
        joined = await self._join_authors(list(merged.values()))
        return FeedResponse(posts=newest_first(joined)[:page_size])

    async def _join_authors(self, posts: list[Post]) -> list[PostWithAuthor]:
        """Attach author cards; posts whose author is gone are dropped."""
        author_ids = list(dict.fromkeys(p.author_id for p in posts))
        found = await fan_out(*(partial(self._profiles.get_by_id, aid) for aid in author_ids))
        authors = {aid: p for aid, p in zip(author_ids, found) if p is not None}

        return [
            PostWithAuthor(**post.model_dump(), author=ProfileSummary.from_profile(authors[post.author_id]))
            for post in posts
            if post.author_id in authors
        ]
