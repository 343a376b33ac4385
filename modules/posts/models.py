"""
Posts module data models.

Reactions and comments are embedded in the post row as ``jsonb`` lists.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.media.models import MediaItem
from modules.profiles.models import ProfileSummary


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PostVisibility(str, Enum):
    """Who can see a post."""

    PUBLIC = "public"            # Everyone
    FOLLOWERS = "followers"      # Users following the author
    CONNECTIONS = "connections"  # Users connected with the author
    PRIVATE = "private"          # Author only


class ReactionType(str, Enum):
    LIKE = "like"
    LOVE = "love"
    HAHA = "haha"
    WOW = "wow"
    SAD = "sad"
    ANGRY = "angry"


class Reaction(BaseModel):
    user_id: str
    type: ReactionType
    created_at: datetime = Field(default_factory=_utc_now)


class Comment(BaseModel):
    id: str
    user_id: str
    content: str
    reactions: list[Reaction] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utc_now)
    is_edited: bool = False


class Post(BaseModel):
    """A post as stored."""

    id: str = Field(..., description="Post ID (UUID)")
    author_id: str = Field(..., description="Author user ID")
    content: str = Field(default="", description="Post text")
    media: list[MediaItem] = Field(default_factory=list)
    reactions: list[Reaction] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    visibility: PostVisibility = PostVisibility.PUBLIC
    tags: list[str] = Field(default_factory=list)
    mentions: list[str] = Field(default_factory=list)
    hashtags: list[str] = Field(default_factory=list)
    is_edited: bool = False
    shares: int = 0
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)


class PostWithAuthor(Post):
    """Post joined with its author's profile card."""

    author: ProfileSummary


class CreatePostRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)
    media: list[MediaItem] = Field(default_factory=list, max_length=10)
    visibility: PostVisibility = PostVisibility.PUBLIC
    tags: list[str] = Field(default_factory=list)


class MediaChanges(BaseModel):
    """Media edits: ``remove`` is applied before ``add``."""

    add: list[MediaItem] = Field(default_factory=list)
    remove: list[str] = Field(default_factory=list, description="Media ids to remove")


class UpdatePostRequest(BaseModel):
    content: Optional[str] = Field(None, min_length=1, max_length=5000)
    media: Optional[MediaChanges] = None
    visibility: Optional[PostVisibility] = None
    tags: Optional[list[str]] = None


class CommentRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


class ReactionRequest(BaseModel):
    type: ReactionType


class ProfilePostsResponse(BaseModel):
    """One page of a single author's posts."""

    posts: list[PostWithAuthor]
    next_cursor: Optional[str] = None
    has_more: bool = False


# Reports


class ReportStatus(str, Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class Report(BaseModel):
    """A user report flagging a post for moderation."""

    id: str
    reporter_id: str
    post_id: str
    reason: str = ""
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=_utc_now)
    resolved_at: Optional[datetime] = None


class ReportRequest(BaseModel):
    reason: str = Field(..., min_length=1, max_length=1000)


class ShareResponse(BaseModel):
    shares: int
