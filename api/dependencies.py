"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

When we're ready to extract a module to a microservice, we only need
to change the implementation here to an HTTP client.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.admin.interfaces import IAdminService
    from modules.auth.interfaces import IAuthService
    from modules.connections.interfaces import IConnectionService
    from modules.events.interfaces import IEventService
    from modules.feed.interfaces import IFeedService
    from modules.groups.interfaces import IGroupService
    from modules.media.interfaces import IMediaService
    from modules.messaging.interfaces import IMessagingService
    from modules.notifications.interfaces import INotificationService
    from modules.posts.interfaces import IPostService
    from modules.profiles.interfaces import IProfileService
    from modules.verification.interfaces import IPhoneVerificationService, IVerificationService
    from modules.events.repository import EventRepository
    from modules.groups.repository import GroupMessageRepository, GroupRepository
    from modules.messaging.repository import ConversationRepository, MessageRepository
    from modules.notifications.repository import NotificationRepository
    from modules.posts.repository import PostRepository, ReportRepository
    from modules.profiles.repository import ProfileRepository
    from modules.verification.repository import VerificationRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._instances: dict[str, object] = {}

    def _get(self, name: str, factory):
        if name not in self._instances:
            self._instances[name] = factory()
        return self._instances[name]

    @property
    def db(self) -> "Client":
        """Get the service-role Supabase client."""
        from shared.database import get_supabase_client
        return get_supabase_client()

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @property
    def profile_repository(self) -> "ProfileRepository":
        from modules.profiles.repository import ProfileRepository
        return self._get("profile_repository", lambda: ProfileRepository(self.db))

    @property
    def notification_repository(self) -> "NotificationRepository":
        from modules.notifications.repository import NotificationRepository
        return self._get("notification_repository", lambda: NotificationRepository(self.db))

    @property
    def post_repository(self) -> "PostRepository":
        from modules.posts.repository import PostRepository
        return self._get("post_repository", lambda: PostRepository(self.db))

    @property
    def report_repository(self) -> "ReportRepository":
        from modules.posts.repository import ReportRepository
        return self._get("report_repository", lambda: ReportRepository(self.db))

    @property
    def conversation_repository(self) -> "ConversationRepository":
        from modules.messaging.repository import ConversationRepository
        return self._get("conversation_repository", lambda: ConversationRepository(self.db))

    @property
    def message_repository(self) -> "MessageRepository":
        from modules.messaging.repository import MessageRepository
        return self._get("message_repository", lambda: MessageRepository(self.db))

    @property
    def group_repository(self) -> "GroupRepository":
        from modules.groups.repository import GroupRepository
        return self._get("group_repository", lambda: GroupRepository(self.db))

    @property
    def group_message_repository(self) -> "GroupMessageRepository":
        from modules.groups.repository import GroupMessageRepository
        return self._get("group_message_repository", lambda: GroupMessageRepository(self.db))

    @property
    def event_repository(self) -> "EventRepository":
        from modules.events.repository import EventRepository
        return self._get("event_repository", lambda: EventRepository(self.db))

    @property
    def verification_repository(self) -> "VerificationRepository":
        from modules.verification.repository import VerificationRepository
        return self._get("verification_repository", lambda: VerificationRepository(self.db))

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        from modules.auth.service import get_auth_service
        return self._get("auth", get_auth_service)

    @property
    def media(self) -> "IMediaService":
        """Get the media CDN service instance."""
        from modules.media.service import MediaService
        return self._get("media", MediaService)

    @property
    def notifications(self) -> "INotificationService":
        """Get the notification service instance."""
        from modules.notifications.service import NotificationService
        return self._get("notifications", lambda: NotificationService(
            repository=self.notification_repository,
            profiles=self.profile_repository,
        ))

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        from modules.posts.service import PostService
        return self._get("posts", lambda: PostService(
            repository=self.post_repository,
            profiles=self.profile_repository,
            reports=self.report_repository,
            media=self.media,
            notifications=self.notifications,
        ))

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        from modules.profiles.service import ProfileService
        return self._get("profiles", lambda: ProfileService(
            repository=self.profile_repository,
            notifications=self.notifications,
            media=self.media,
            auth=self.auth,
            posts=self.posts,
        ))

    @property
    def feed(self) -> "IFeedService":
        """Get the feed service instance."""
        from modules.feed.service import FeedService
        return self._get("feed", lambda: FeedService(
            posts=self.post_repository,
            profiles=self.profile_repository,
        ))

    @property
    def connections(self) -> "IConnectionService":
        """Get the connection service instance."""
        from modules.connections.service import ConnectionService
        return self._get("connections", lambda: ConnectionService(
            requests=self.notification_repository,
            profiles=self.profile_repository,
            notifications=self.notifications,
        ))

    @property
    def messaging(self) -> "IMessagingService":
        """Get the messaging service instance."""
        from modules.messaging.service import MessagingService
        return self._get("messaging", lambda: MessagingService(
            conversations=self.conversation_repository,
            messages=self.message_repository,
            profiles=self.profile_repository,
            notifications=self.notifications,
        ))

    @property
    def groups(self) -> "IGroupService":
        """Get the groups service instance."""
        from modules.groups.service import GroupService
        return self._get("groups", lambda: GroupService(
            groups=self.group_repository,
            messages=self.group_message_repository,
            profiles=self.profile_repository,
        ))

    @property
    def events(self) -> "IEventService":
        """Get the events service instance."""
        from modules.events.service import EventService
        return self._get("events", lambda: EventService(
            repository=self.event_repository,
            profiles=self.profile_repository,
        ))

    @property
    def verification(self) -> "IVerificationService":
        """Get the verification service instance."""
        from modules.verification.service import VerificationService
        return self._get("verification", lambda: VerificationService(
            repository=self.verification_repository,
            profiles=self.profile_repository,
            auth=self.auth,
        ))

    @property
    def phone_verification(self) -> "IPhoneVerificationService":
        """Get the phone verification service instance."""
        from modules.verification.service import PhoneVerificationService
        from modules.verification.sms import TwilioVerifyClient
        return self._get("phone_verification", lambda: PhoneVerificationService(
            client=TwilioVerifyClient(),
            profiles=self.profile_repository,
        ))

    @property
    def admin(self) -> "IAdminService":
        """Get the admin service instance."""
        from modules.admin.service import AdminService
        return self._get("admin", lambda: AdminService(
            profiles=self.profile_repository,
            reports=self.report_repository,
            verifications=self.verification_repository,
            profile_service=self.profiles,
        ))

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._instances.clear()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_media_service() -> "IMediaService":
    """FastAPI dependency for media service."""
    return get_container().media


def get_post_service() -> "IPostService":
    """FastAPI dependency for post service."""
    return get_container().posts


def get_feed_service() -> "IFeedService":
    """FastAPI dependency for feed service."""
    return get_container().feed


def get_connection_service() -> "IConnectionService":
    """FastAPI dependency for connection service."""
    return get_container().connections


def get_notification_service() -> "INotificationService":
    """FastAPI dependency for notification service."""
    return get_container().notifications


def get_messaging_service() -> "IMessagingService":
    """FastAPI dependency for messaging service."""
    return get_container().messaging


def get_group_service() -> "IGroupService":
    """FastAPI dependency for groups service."""
    return get_container().groups


def get_event_service() -> "IEventService":
    """FastAPI dependency for events service."""
    return get_container().events


def get_verification_service() -> "IVerificationService":
    """FastAPI dependency for verification service."""
    return get_container().verification


def get_phone_verification_service() -> "IPhoneVerificationService":
    """FastAPI dependency for phone verification service."""
    return get_container().phone_verification


def get_admin_service() -> "IAdminService":
    """FastAPI dependency for admin service."""
    return get_container().admin
