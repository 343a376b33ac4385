"""Tests for home feed assembly."""

import threading

import pytest
from typing import Optional
from unittest.mock import MagicMock

from modules.feed.models import FeedScope
from modules.feed.service import FeedService, scope_queries
from modules.posts.models import Post, PostVisibility
from shared.config import Settings
from tests.conftest import make_post, make_profile


class InMemoryPosts:
    """Applies fetch_scope filters to a fixed list of posts."""

    def __init__(self, posts: list[Post]):
        self.posts = posts
        self.calls: list[dict] = []

    def fetch_scope(
        self,
        limit: int,
        author_id: Optional[str] = None,
        visibility: Optional[PostVisibility] = None,
        author_ids: Optional[list[str]] = None,
    ) -> list[Post]:
        self.calls.append({"author_id": author_id, "visibility": visibility, "author_ids": author_ids})
        rows = [
            p for p in self.posts
            if (author_id is None or p.author_id == author_id)
            and (visibility is None or p.visibility == visibility)
            and (author_ids is None or p.author_id in author_ids)
        ]
        return sorted(rows, key=lambda p: p.created_at, reverse=True)[:limit]


def profiles_of(*profiles):
    by_id = {p.id: p for p in profiles}
    mock = MagicMock()
    mock.get_by_id.side_effect = lambda user_id: by_id.get(user_id)
    return mock


def feed_service(posts, profiles, **settings) -> FeedService:
    return FeedService(posts, profiles, settings=Settings(**settings))


class TestScopeQueries:
    def test_empty_lists_skip_scopes(self):
        queries = scope_queries(MagicMock(), "a", make_profile("a"), 20, 10)
        assert [scope for scope, _ in queries] == [FeedScope.OWN, FeedScope.PUBLIC]

    def test_all_scopes_in_priority_order(self):
        profile = make_profile("a", following=["b"], connections=["c"])
        queries = scope_queries(MagicMock(), "a", profile, 20, 10)
        assert [scope for scope, _ in queries] == list(FeedScope)

    def test_missing_profile(self):
        queries = scope_queries(MagicMock(), "a", None, 20, 10)
        assert len(queries) == 2

    def test_id_lists_are_capped(self):
        following = [f"u{i}" for i in range(15)]
        posts = MagicMock()
        queries = scope_queries(posts, "a", make_profile("a", following=following), 20, 10)

        queries[2][1]()

        assert posts.fetch_scope.call_args.kwargs["author_ids"] == following[:10]


class TestGetFeed:
    @pytest.mark.asyncio
    async def test_follower_sees_followers_only_post(self):
        a = make_profile("a", following=["b"])
        b = make_profile("b", followers=["a"])
        posts = InMemoryPosts([
            make_post("p1", author_id="b", minutes=1, visibility=PostVisibility.FOLLOWERS),
            make_post("p2", author_id="b", minutes=2, visibility=PostVisibility.CONNECTIONS),
        ])

        feed = await feed_service(posts, profiles_of(a, b)).get_feed("a")

        assert [p.id for p in feed.posts] == ["p1"]
        assert feed.posts[0].author.id == "b"

    @pytest.mark.asyncio
    async def test_no_duplicates_and_newest_first(self):
        a = make_profile("a", following=["b"], connections=["b"])
        b = make_profile("b")
        posts = InMemoryPosts([
            make_post("own", author_id="a", minutes=5, visibility=PostVisibility.PUBLIC),
            make_post("pub", author_id="b", minutes=1),
            make_post("fol", author_id="b", minutes=3, visibility=PostVisibility.FOLLOWERS),
            make_post("con", author_id="b", minutes=4, visibility=PostVisibility.CONNECTIONS),
        ])

        feed = await feed_service(posts, profiles_of(a, b)).get_feed("a")

        ids = [p.id for p in feed.posts]
        assert ids == ["own", "con", "fol", "pub"]
        assert len(set(ids)) == len(ids)

    @pytest.mark.asyncio
    async def test_other_users_private_posts_excluded(self):
        a = make_profile("a", following=["b"], connections=["b"])
        b = make_profile("b")
        posts = InMemoryPosts([
            make_post("secret", author_id="b", visibility=PostVisibility.PRIVATE),
            make_post("mine", author_id="a", visibility=PostVisibility.PRIVATE),
        ])

        feed = await feed_service(posts, profiles_of(a, b)).get_feed("a")

        assert [p.id for p in feed.posts] == ["mine"]

    @pytest.mark.asyncio
    async def test_page_size_truncates(self):
        a = make_profile("a")
        posts = InMemoryPosts([make_post(f"p{i:02d}", author_id="a", minutes=i) for i in range(30)])

        feed = await feed_service(posts, profiles_of(a)).get_feed("a")

        assert len(feed.posts) == 20
        assert feed.posts[0].id == "p29"
        created = [p.created_at for p in feed.posts]
        assert created == sorted(created, reverse=True)

    @pytest.mark.asyncio
    async def test_followed_ids_beyond_limit_are_ignored(self):
        following = [f"u{i}" for i in range(12)]
        authors = [make_profile(uid) for uid in following]
        a = make_profile("a", following=following)
        posts = InMemoryPosts([
            make_post(f"post-{uid}", author_id=uid, visibility=PostVisibility.FOLLOWERS)
            for uid in following
        ])

        feed = await feed_service(posts, profiles_of(a, *authors)).get_feed("a")

        ids = {p.id for p in feed.posts}
        assert "post-u9" in ids
        assert "post-u10" not in ids
        assert "post-u11" not in ids

    @pytest.mark.asyncio
    async def test_scope_limit_is_configurable(self):
        following = [f"u{i}" for i in range(12)]
        authors = [make_profile(uid) for uid in following]
        a = make_profile("a", following=following)
        posts = InMemoryPosts([
            make_post(f"post-{uid}", author_id=uid, visibility=PostVisibility.FOLLOWERS)
            for uid in following
        ])

        service = feed_service(posts, profiles_of(a, *authors), feed_scope_limit=30)
        feed = await service.get_feed("a")

        assert len(feed.posts) == 12

    @pytest.mark.asyncio
    async def test_missing_author_is_dropped(self):
        a = make_profile("a")
        posts = InMemoryPosts([
            make_post("orphan", author_id="gone"),
            make_post("mine", author_id="a"),
        ])

        feed = await feed_service(posts, profiles_of(a)).get_feed("a")

        assert [p.id for p in feed.posts] == ["mine"]

    @pytest.mark.asyncio
    async def test_branch_failure_propagates(self):
        a = make_profile("a", following=["b"])
        posts = MagicMock()
        posts.fetch_scope.side_effect = [[], [], RuntimeError("db down")]

        with pytest.raises(RuntimeError, match="db down"):
            await feed_service(posts, profiles_of(a)).get_feed("a")

    @pytest.mark.asyncio
    async def test_unknown_user_gets_public_posts(self):
        b = make_profile("b")
        posts = InMemoryPosts([
            make_post("pub", author_id="b"),
            make_post("fol", author_id="b", visibility=PostVisibility.FOLLOWERS),
        ])

        feed = await feed_service(posts, profiles_of(b)).get_feed("nobody")

        assert [p.id for p in feed.posts] == ["pub"]

    @pytest.mark.asyncio
    async def test_database_calls_run_off_the_event_loop(self):
        loop_thread = threading.current_thread()
        a = make_profile("a")
        threads = []

        def lookup(user_id):
            threads.append(threading.current_thread())
            return a if user_id == "a" else None

        profiles = MagicMock()
        profiles.get_by_id.side_effect = lookup
        posts = InMemoryPosts([make_post("mine", author_id="a")])

        feed = await feed_service(posts, profiles).get_feed("a")

        assert [p.id for p in feed.posts] == ["mine"]
        assert threads
        assert loop_thread not in threads
