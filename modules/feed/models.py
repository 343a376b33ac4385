"""
Feed module data models.
"""

from enum import Enum
from pydantic import BaseModel, Field

from modules.posts.models import PostWithAuthor


class FeedScope(str, Enum):
    """
    Query scopes merged into the home feed.

    Declaration order is the merge priority.
    """

    OWN = "own"
    PUBLIC = "public"
    FOLLOWERS = "followers"
    CONNECTIONS = "connections"


class FeedResponse(BaseModel):
    """Home feed: newest first, no duplicates."""

    posts: list[PostWithAuthor] = Field(default_factory=list)
