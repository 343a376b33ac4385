"""
Pure post rules: text extraction, reaction list edits and visibility.

Nothing here touches the database, so the services and the feed can share
the same rules and tests can exercise them directly.
"""

import re
from typing import Optional

from modules.profiles.models import Profile

from .models import Post, PostVisibility, Reaction, ReactionType

MENTION_PATTERN = re.compile(r"@[\w-]+")
HASHTAG_PATTERN = re.compile(r"#[\w-]+")


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def extract_mentions(content: str) -> list[str]:
    """Distinct ``@handle`` tokens in order of first appearance."""
    return _unique(MENTION_PATTERN.findall(content))


def extract_hashtags(content: str) -> list[str]:
    """Distinct ``#tag`` tokens in order of first appearance."""
    return _unique(HASHTAG_PATTERN.findall(content))


# -----------------------------------------------------------------------------
# Reactions: at most one per user
# -----------------------------------------------------------------------------


def find_reaction(reactions: list[Reaction], user_id: str) -> Optional[Reaction]:
    return next((r for r in reactions if r.user_id == user_id), None)


def with_reaction(
    reactions: list[Reaction],
    user_id: str,
    reaction_type: ReactionType,
) -> list[Reaction]:
    """Set the user's reaction, replacing the type of an existing one."""
    if find_reaction(reactions, user_id) is None:
        return reactions + [Reaction(user_id=user_id, type=reaction_type)]
    return [
        r.model_copy(update={"type": reaction_type}) if r.user_id == user_id else r
        for r in reactions
    ]


def without_reaction(reactions: list[Reaction], user_id: str) -> list[Reaction]:
    return [r for r in reactions if r.user_id != user_id]


def toggled_reaction(
    reactions: list[Reaction],
    user_id: str,
    reaction_type: ReactionType,
) -> list[Reaction]:
    """
    Toggle a reaction.

    Same type already present -> removed; otherwise set (added or replaced).
    Applying the same toggle twice to a list without the user's reaction
    returns a list without it.
    """
    existing = find_reaction(reactions, user_id)
    if existing is not None and existing.type == reaction_type:
        return without_reaction(reactions, user_id)
    return with_reaction(reactions, user_id, reaction_type)


# -----------------------------------------------------------------------------
# Visibility
# -----------------------------------------------------------------------------


def visible_scopes(author_id: str, viewer: Optional[Profile]) -> set[PostVisibility]:
    """
    Visibility levels of ``author_id``'s posts that ``viewer`` may see.

    Follower access is read from the viewer's ``following`` list and
    connection access from the viewer's ``connections`` list.
    """
    if viewer is not None and viewer.id == author_id:
        return set(PostVisibility)

    allowed = {PostVisibility.PUBLIC}
    if viewer is not None:
        if author_id in viewer.following:
            allowed.add(PostVisibility.FOLLOWERS)
        if author_id in viewer.connections:
            allowed.add(PostVisibility.CONNECTIONS)
    return allowed


def can_view(post: Post, viewer: Optional[Profile]) -> bool:
    return post.visibility in visible_scopes(post.author_id, viewer)

