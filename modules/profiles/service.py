"""
Profiles service implementation.

Owns the profile record, the follow/connection graph and account deletion.
"""

import logging
from typing import Optional, TYPE_CHECKING

from modules.notifications.models import NotificationType

from .interfaces import IProfileService
from .models import (
    CreateProfileRequest,
    FieldVisibility,
    Presence,
    PrivacySettings,
    Profile,
    ProfileSummary,
    UpdateProfileRequest,
    UserRole,
)
from .repository import ProfileRepository, RELATION_FIELDS
from .exceptions import ProfileAlreadyExistsError, ProfileNotFoundError, SelfRelationError

if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.media.interfaces import IMediaService
    from modules.notifications.interfaces import INotificationService
    from modules.posts.interfaces import IPostService

logger = logging.getLogger(__name__)


def field_visible(visibility: FieldVisibility, owner: Profile, viewer_id: Optional[str]) -> bool:
    """Whether ``viewer_id`` may see a field of ``owner`` with this visibility."""
    if viewer_id == owner.id:
        return True
    if visibility == FieldVisibility.PUBLIC:
        return True
    if visibility == FieldVisibility.CONNECTIONS:
        return viewer_id is not None and viewer_id in owner.connections
    return False


class ProfileService(IProfileService):
    """Profile service backed by Supabase."""

    def __init__(
        self,
        repository: ProfileRepository,
        notifications: Optional["INotificationService"] = None,
        media: Optional["IMediaService"] = None,
        auth: Optional["IAuthService"] = None,
        posts: Optional["IPostService"] = None,
    ):
        self._repo = repository
        self._notifications = notifications
        self._media = media
        self._auth = auth
        self._posts = posts

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        return self._repo.get_by_id(user_id)

    async def get_profile_for_viewer(
        self,
        user_id: str,
        viewer_id: Optional[str],
    ) -> Optional[Profile]:
        profile = self._repo.get_by_id(user_id)
        if profile is None:
            return None

        hidden = {}
        if not field_visible(profile.privacy.email_visibility, profile, viewer_id):
            hidden["email"] = ""
        if not field_visible(profile.privacy.phone_visibility, profile, viewer_id):
            hidden["phone_number"] = None
        return profile.model_copy(update=hidden) if hidden else profile

    async def create_profile(
        self,
        user_id: str,
        email: str,
        request: CreateProfileRequest,
    ) -> Profile:
        if self._repo.get_by_id(user_id) is not None:
            raise ProfileAlreadyExistsError(user_id)

        defaults = Profile(id=user_id, email=email, **request.model_dump())
        profile = self._repo.create(defaults.model_dump(mode="json"))
        logger.info(f"Created {profile.role.value} profile for {user_id}")
        return profile

    async def update_profile(self, user_id: str, updates: UpdateProfileRequest) -> Profile:
        data = updates.model_dump(mode="json", exclude_unset=True)
        if not data:
            profile = self._repo.get_by_id(user_id)
        else:
            profile = self._repo.update(user_id, data)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def search_profiles(
        self,
        term: str,
        role: Optional[UserRole] = None,
    ) -> list[ProfileSummary]:
        profiles = self._repo.search(term, role.value if role else None)
        return [ProfileSummary.from_profile(p) for p in profiles]

    # -------------------------------------------------------------------------
    # Social graph
    # -------------------------------------------------------------------------

    def _require_other(self, user_id: str, other_id: str, action: str) -> Profile:
        if user_id == other_id:
            raise SelfRelationError(action)
        other = self._repo.get_by_id(other_id)
        if other is None:
            raise ProfileNotFoundError(other_id)
        return other

    async def follow(self, user_id: str, target_id: str) -> None:
        self._require_other(user_id, target_id, "follow")

        added = self._repo.add_to_list(user_id, "following", target_id)
        self._repo.add_to_list(target_id, "followers", user_id)
        if not added or self._notifications is None:
            return

        follower = self._repo.get_by_id(user_id)
        name = follower.display_name if follower and follower.display_name else "Someone"
        await self._notifications.create_notification(
            target_id,
            NotificationType.NEW_FOLLOWER,
            "New follower",
            f"{name} started following you",
            sender_id=user_id,
        )

    async def unfollow(self, user_id: str, target_id: str) -> None:
        if user_id == target_id:
            raise SelfRelationError("unfollow")
        self._repo.remove_from_list(user_id, "following", target_id)
        self._repo.remove_from_list(target_id, "followers", user_id)

    async def connect(self, user_id: str, other_id: str) -> None:
        self._require_other(user_id, other_id, "connect with")
        self._repo.add_to_list(user_id, "connections", other_id)
        self._repo.add_to_list(other_id, "connections", user_id)

    async def disconnect(self, user_id: str, other_id: str) -> None:
        if user_id == other_id:
            raise SelfRelationError("disconnect from")
        self._repo.remove_from_list(user_id, "connections", other_id)
        self._repo.remove_from_list(other_id, "connections", user_id)

    # -------------------------------------------------------------------------
    # Privacy
    # -------------------------------------------------------------------------

    async def get_privacy(self, user_id: str) -> PrivacySettings:
        settings = self._repo.get_privacy(user_id)
        if settings is None:
            raise ProfileNotFoundError(user_id)
        return settings

    async def update_privacy(self, user_id: str, settings: PrivacySettings) -> PrivacySettings:
        if self._repo.get_privacy(user_id) is None:
            raise ProfileNotFoundError(user_id)
        self._repo.save_privacy(user_id, settings)
        return settings

    # -------------------------------------------------------------------------
    # Presence
    # -------------------------------------------------------------------------

    async def update_presence(self, user_id: str, online: bool) -> Presence:
        if self._repo.get_by_id(user_id) is None:
            raise ProfileNotFoundError(user_id)
        return self._repo.upsert_presence(user_id, online)

    async def get_presence(self, user_id: str, viewer_id: str) -> Presence:
        profile = self._repo.get_by_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        presence = self._repo.get_presence(user_id) or Presence(user_id=user_id)
        if viewer_id == user_id:
            return presence

        hidden = {}
        if not profile.privacy.show_online_status:
            hidden["online"] = False
        if not profile.privacy.show_last_active:
            hidden["last_seen"] = None
        return presence.model_copy(update=hidden)

    # -------------------------------------------------------------------------
    # Account deletion
    # -------------------------------------------------------------------------

    async def delete_account(self, user_id: str) -> None:
        profile = self._repo.get_by_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)

        if self._notifications is not None:
            await self._notifications.delete_for_user(user_id)

        if self._posts is not None:
            deleted = await self._posts.delete_posts_by_author(user_id)
            logger.debug(f"Deleted {deleted} posts of {user_id}")

        for field in RELATION_FIELDS:
            for other_id in self._repo.find_referencing(field, user_id):
                self._repo.remove_from_list(other_id, field, user_id)

        if self._media is not None and profile.photo_url:
            await self._media.destroy_url(profile.photo_url)

        try:
            self._repo.delete_presence(user_id)
        except Exception as e:
            logger.warning(f"Continuing after presence cleanup failure for {user_id}: {e}")

        self._repo.delete(user_id)

        if self._auth is not None:
            await self._auth.delete_auth_user(user_id)

        logger.info(f"Deleted account {user_id}")
