"""
Posts module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError, ValidationError


class PostNotFoundError(NotFoundError):
    """Raised when a post does not exist."""

    def __init__(self, post_id: str):
        super().__init__(
            f"Post not found: {post_id}",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class PostAccessDeniedError(AuthorizationError):
    """Raised when a user may not see or change a post."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(
            f"Access denied to post: {post_id}",
            code="POST_ACCESS_DENIED",
            details={"post_id": post_id, "user_id": user_id},
        )


class CommentNotFoundError(NotFoundError):
    def __init__(self, post_id: str, comment_id: str):
        super().__init__(
            f"Comment not found: {comment_id}",
            code="COMMENT_NOT_FOUND",
            details={"post_id": post_id, "comment_id": comment_id},
        )


class CommentAccessDeniedError(AuthorizationError):
    """Raised when a user edits or deletes someone else's comment."""

    def __init__(self, comment_id: str, user_id: str):
        super().__init__(
            f"Access denied to comment: {comment_id}",
            code="COMMENT_ACCESS_DENIED",
            details={"comment_id": comment_id, "user_id": user_id},
        )


class InvalidCursorError(ValidationError):
    def __init__(self, cursor: str):
        super().__init__(
            "Invalid page cursor",
            code="INVALID_CURSOR",
            details={"cursor": cursor},
        )
