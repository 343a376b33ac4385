"""Tests for the pure post rules."""

import pytest

from modules.posts.models import PostVisibility, Reaction, ReactionType
from modules.posts.rules import (
    can_view,
    extract_hashtags,
    extract_mentions,
    find_reaction,
    toggled_reaction,
    visible_scopes,
    with_reaction,
    without_reaction,
)
from tests.conftest import make_post, make_profile


class TestExtraction:
    def test_mentions_in_order_without_duplicates(self):
        content = "Great game @sam and @lee-2! Thanks again @sam"
        assert extract_mentions(content) == ["@sam", "@lee-2"]

    def test_hashtags_in_order_without_duplicates(self):
        content = "#hoops all day #NCAA #hoops"
        assert extract_hashtags(content) == ["#hoops", "#NCAA"]

    def test_no_tokens(self):
        assert extract_mentions("plain text") == []
        assert extract_hashtags("plain text") == []

    def test_mentions_and_hashtags_are_independent(self):
        content = "@coach #training"
        assert extract_mentions(content) == ["@coach"]
        assert extract_hashtags(content) == ["#training"]


class TestReactions:
    def test_with_reaction_adds(self):
        reactions = with_reaction([], "alice", ReactionType.LIKE)
        assert [(r.user_id, r.type) for r in reactions] == [("alice", ReactionType.LIKE)]

    def test_with_reaction_replaces_type(self):
        start = [Reaction(user_id="alice", type=ReactionType.LIKE)]
        reactions = with_reaction(start, "alice", ReactionType.LOVE)
        assert len(reactions) == 1
        assert reactions[0].type == ReactionType.LOVE

    def test_without_reaction(self):
        start = [
            Reaction(user_id="alice", type=ReactionType.LIKE),
            Reaction(user_id="bob", type=ReactionType.WOW),
        ]
        assert [r.user_id for r in without_reaction(start, "alice")] == ["bob"]

    def test_toggle_same_type_removes(self):
        start = [Reaction(user_id="alice", type=ReactionType.LIKE)]
        assert toggled_reaction(start, "alice", ReactionType.LIKE) == []

    def test_toggle_other_type_replaces(self):
        start = [Reaction(user_id="alice", type=ReactionType.LIKE)]
        reactions = toggled_reaction(start, "alice", ReactionType.HAHA)
        assert [(r.user_id, r.type) for r in reactions] == [("alice", ReactionType.HAHA)]

    @pytest.mark.parametrize("reaction_type", list(ReactionType))
    def test_toggle_twice_restores_absence(self, reaction_type):
        start = [Reaction(user_id="bob", type=ReactionType.SAD)]
        once = toggled_reaction(start, "alice", reaction_type)
        twice = toggled_reaction(once, "alice", reaction_type)
        assert find_reaction(once, "alice") is not None
        assert find_reaction(twice, "alice") is None
        assert [r.user_id for r in twice] == ["bob"]

    def test_one_reaction_per_user(self):
        reactions: list[Reaction] = []
        for reaction_type in [ReactionType.LIKE, ReactionType.LOVE, ReactionType.ANGRY]:
            reactions = with_reaction(reactions, "alice", reaction_type)
            reactions = toggled_reaction(reactions, "bob", reaction_type)
        assert sum(1 for r in reactions if r.user_id == "alice") == 1
        assert sum(1 for r in reactions if r.user_id == "bob") <= 1


class TestVisibility:
    def test_author_sees_everything(self):
        assert visible_scopes("alice", make_profile("alice")) == set(PostVisibility)

    def test_anonymous_sees_public_only(self):
        assert visible_scopes("alice", None) == {PostVisibility.PUBLIC}

    def test_follower_sees_followers_posts(self):
        viewer = make_profile("bob", following=["alice"])
        assert visible_scopes("alice", viewer) == {
            PostVisibility.PUBLIC,
            PostVisibility.FOLLOWERS,
        }

    def test_connection_sees_connections_posts(self):
        viewer = make_profile("bob", following=["alice"], connections=["alice"])
        assert visible_scopes("alice", viewer) == {
            PostVisibility.PUBLIC,
            PostVisibility.FOLLOWERS,
            PostVisibility.CONNECTIONS,
        }

    def test_private_is_author_only(self):
        post = make_post("p1", author_id="alice", visibility=PostVisibility.PRIVATE)
        viewer = make_profile("bob", following=["alice"], connections=["alice"])
        assert can_view(post, viewer) is False
        assert can_view(post, make_profile("alice")) is True
