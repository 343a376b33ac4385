"""
Groups module exceptions.
"""

from shared.exceptions import AuthorizationError, ConflictError, NotFoundError


class GroupNotFoundError(NotFoundError):
    """Raised when a group does not exist or is private to the caller."""

    def __init__(self, group_id: str):
        super().__init__(
            f"Group not found: {group_id}",
            code="GROUP_NOT_FOUND",
            details={"group_id": group_id},
        )


class NotGroupMemberError(AuthorizationError):
    def __init__(self, group_id: str, user_id: str):
        super().__init__(
            f"Not a member of group: {group_id}",
            code="NOT_GROUP_MEMBER",
            details={"group_id": group_id, "user_id": user_id},
        )


class NotGroupAdminError(AuthorizationError):
    def __init__(self, group_id: str, user_id: str):
        super().__init__(
            f"Not an admin of group: {group_id}",
            code="NOT_GROUP_ADMIN",
            details={"group_id": group_id, "user_id": user_id},
        )


class GroupFullError(ConflictError):
    def __init__(self, group_id: str, max_members: int):
        super().__init__(
            "Group is full",
            code="GROUP_FULL",
            details={"group_id": group_id, "max_members": max_members},
        )


class LastGroupAdminError(ConflictError):
    """Raised when the only admin tries to leave a group that still has members."""

    def __init__(self, group_id: str):
        super().__init__(
            "The last admin cannot leave while other members remain",
            code="LAST_GROUP_ADMIN",
            details={"group_id": group_id},
        )
