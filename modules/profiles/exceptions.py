"""
Profiles module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class ProfileNotFoundError(NotFoundError):
    """Raised when a profile does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Profile not found: {user_id}",
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )


class ProfileAlreadyExistsError(ConflictError):
    """Raised when registering a profile that already exists."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Profile already exists: {user_id}",
            code="PROFILE_EXISTS",
            details={"user_id": user_id},
        )


class SelfRelationError(ValidationError):
    """Raised when a user tries to follow or connect with themselves."""

    def __init__(self, action: str):
        super().__init__(
            f"Cannot {action} yourself",
            code="SELF_RELATION",
            details={"action": action},
        )
