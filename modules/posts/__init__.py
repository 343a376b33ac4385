"""
Posts module.

Posts with embedded media, reactions and comments; post reports.

Public API:
- IPostService: Interface for post operations
- Post, PostWithAuthor, PostVisibility, Reaction, ReactionType, Comment
- Post exceptions
"""

from .interfaces import IPostService
from .models import (
    Comment,
    Post,
    PostVisibility,
    PostWithAuthor,
    Reaction,
    ReactionType,
    Report,
    ReportStatus,
)
from .exceptions import (
    CommentAccessDeniedError,
    CommentNotFoundError,
    InvalidCursorError,
    PostAccessDeniedError,
    PostNotFoundError,
)

__all__ = [
    "IPostService",
    "Comment",
    "Post",
    "PostVisibility",
    "PostWithAuthor",
    "Reaction",
    "ReactionType",
    "Report",
    "ReportStatus",
    "CommentAccessDeniedError",
    "CommentNotFoundError",
    "InvalidCursorError",
    "PostAccessDeniedError",
    "PostNotFoundError",
]
