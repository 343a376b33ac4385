"""
Profiles module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import (
    CreateProfileRequest,
    Presence,
    PrivacySettings,
    Profile,
    ProfileSummary,
    UpdateProfileRequest,
    UserRole,
)


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for profile and social-graph operations.

    Relation updates are set-like: following someone twice leaves one
    entry, unfollowing someone not followed is a no-op.
    """

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        """Get a profile, or None if the user has none."""
        ...

    async def get_profile_for_viewer(
        self,
        user_id: str,
        viewer_id: Optional[str],
    ) -> Optional[Profile]:
        """
        Get a profile with contact fields hidden according to its owner's
        privacy settings and the viewer's relation to them.
        """
        ...

    async def create_profile(
        self,
        user_id: str,
        email: str,
        request: CreateProfileRequest,
    ) -> Profile:
        """
        Create the profile record at registration.

        Raises:
            ProfileAlreadyExistsError: If the user already has a profile
        """
        ...

    async def update_profile(self, user_id: str, updates: UpdateProfileRequest) -> Profile:
        """
        Apply a partial update.

        Raises:
            ProfileNotFoundError: If the profile doesn't exist
        """
        ...

    async def search_profiles(
        self,
        term: str,
        role: Optional[UserRole] = None,
    ) -> list[ProfileSummary]:
        """Case-insensitive search by display name or email."""
        ...

    async def follow(self, user_id: str, target_id: str) -> None:
        """
        Follow another user and notify them.

        Raises:
            SelfRelationError: If user_id == target_id
            ProfileNotFoundError: If the target doesn't exist
        """
        ...

    async def unfollow(self, user_id: str, target_id: str) -> None:
        ...

    async def connect(self, user_id: str, other_id: str) -> None:
        """Add a symmetric connection between two users."""
        ...

    async def disconnect(self, user_id: str, other_id: str) -> None:
        """Remove the connection between two users from both sides."""
        ...

    async def get_privacy(self, user_id: str) -> PrivacySettings:
        ...

    async def update_privacy(self, user_id: str, settings: PrivacySettings) -> PrivacySettings:
        ...

    async def update_presence(self, user_id: str, online: bool) -> Presence:
        """
        Record the user's online status with the current time as last seen.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def get_presence(self, user_id: str, viewer_id: str) -> Presence:
        """
        A user's presence as ``viewer_id`` may see it.

        Other viewers see ``online`` as False when the owner hides their
        online status and no ``last_seen`` when the owner hides last-active.
        """
        ...

    async def delete_account(self, user_id: str) -> None:
        """
        Delete the user and everything that references them.

        Steps run in order and are not rolled back on failure.
        """
        ...
