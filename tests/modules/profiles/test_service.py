"""Tests for the profiles service."""

import pytest
from unittest.mock import AsyncMock, MagicMock, call

from modules.notifications.models import NotificationType
from modules.profiles.exceptions import (
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
    SelfRelationError,
)
from modules.profiles.models import (
    CreateProfileRequest,
    FieldVisibility,
    Presence,
    PrivacySettings,
    UpdateProfileRequest,
    UserRole,
)
from modules.profiles.service import ProfileService, field_visible
from tests.conftest import BASE_TIME, make_profile


@pytest.fixture
def repo():
    return MagicMock()


@pytest.fixture
def notifications():
    return AsyncMock()


@pytest.fixture
def media():
    return AsyncMock()


@pytest.fixture
def auth():
    return AsyncMock()


@pytest.fixture
def posts():
    mock = AsyncMock()
    mock.delete_posts_by_author.return_value = 2
    return mock


@pytest.fixture
def service(repo, notifications, media, auth, posts):
    return ProfileService(repo, notifications=notifications, media=media, auth=auth, posts=posts)


class TestFieldVisible:
    def test_owner_sees_private_fields(self):
        owner = make_profile("owner")
        assert field_visible(FieldVisibility.PRIVATE, owner, "owner") is True

    def test_public_visible_to_anyone(self):
        owner = make_profile("owner")
        assert field_visible(FieldVisibility.PUBLIC, owner, None) is True

    def test_connections_only_for_connected_viewers(self):
        owner = make_profile("owner", connections=["friend"])
        assert field_visible(FieldVisibility.CONNECTIONS, owner, "friend") is True
        assert field_visible(FieldVisibility.CONNECTIONS, owner, "stranger") is False
        assert field_visible(FieldVisibility.CONNECTIONS, owner, None) is False

    def test_private_hidden_from_others(self):
        owner = make_profile("owner", connections=["friend"])
        assert field_visible(FieldVisibility.PRIVATE, owner, "friend") is False


class TestGetProfile:
    @pytest.mark.asyncio
    async def test_viewer_redaction(self, service, repo):
        repo.get_by_id.return_value = make_profile("owner", phone_number="+15550001111")

        profile = await service.get_profile_for_viewer("owner", "stranger")

        # Defaults: email visible to connections, phone private
        assert profile.email == ""
        assert profile.phone_number is None
        assert profile.display_name == "Owner"

    @pytest.mark.asyncio
    async def test_connection_sees_email_not_phone(self, service, repo):
        repo.get_by_id.return_value = make_profile(
            "owner", phone_number="+15550001111", connections=["friend"]
        )
        profile = await service.get_profile_for_viewer("owner", "friend")
        assert profile.email == "owner@example.com"
        assert profile.phone_number is None

    @pytest.mark.asyncio
    async def test_owner_sees_everything(self, service, repo):
        repo.get_by_id.return_value = make_profile("owner", phone_number="+15550001111")
        profile = await service.get_profile_for_viewer("owner", "owner")
        assert profile.phone_number == "+15550001111"

    @pytest.mark.asyncio
    async def test_missing_profile(self, service, repo):
        repo.get_by_id.return_value = None
        assert await service.get_profile_for_viewer("ghost", "viewer") is None


class TestCreateAndUpdate:
    @pytest.mark.asyncio
    async def test_create_profile(self, service, repo):
        repo.get_by_id.return_value = None
        repo.create.side_effect = lambda data: make_profile(data["id"], role=data["role"])

        request = CreateProfileRequest(display_name="Coach K", role=UserRole.COACH)
        profile = await service.create_profile("user-1", "k@example.com", request)

        data = repo.create.call_args.args[0]
        assert data["email"] == "k@example.com"
        assert data["role"] == "coach"
        assert data["followers"] == []
        assert data["privacy"]["allow_messages"] is True
        assert profile.role == UserRole.COACH

    @pytest.mark.asyncio
    async def test_create_existing_profile_conflicts(self, service, repo):
        repo.get_by_id.return_value = make_profile("user-1")
        with pytest.raises(ProfileAlreadyExistsError):
            await service.create_profile(
                "user-1", "a@example.com", CreateProfileRequest(display_name="A", role=UserRole.ATHLETE)
            )
        repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_sends_only_set_fields(self, service, repo):
        repo.update.return_value = make_profile("user-1", bio="new")
        await service.update_profile("user-1", UpdateProfileRequest(bio="new"))
        repo.update.assert_called_once_with("user-1", {"bio": "new"})

    @pytest.mark.asyncio
    async def test_empty_update_returns_current(self, service, repo):
        repo.get_by_id.return_value = make_profile("user-1")
        profile = await service.update_profile("user-1", UpdateProfileRequest())
        repo.update.assert_not_called()
        assert profile.id == "user-1"

    @pytest.mark.asyncio
    async def test_update_missing_profile(self, service, repo):
        repo.update.return_value = None
        with pytest.raises(ProfileNotFoundError):
            await service.update_profile("ghost", UpdateProfileRequest(bio="x"))


class TestSearch:
    @pytest.mark.asyncio
    async def test_search_returns_summaries(self, service, repo):
        repo.search.return_value = [make_profile("a", is_verified=True)]
        results = await service.search_profiles("a", UserRole.ATHLETE)
        repo.search.assert_called_once_with("a", "athlete")
        assert results[0].id == "a"
        assert results[0].is_verified is True


class TestFollow:
    @pytest.mark.asyncio
    async def test_follow_updates_both_lists_and_notifies(self, service, repo, notifications):
        repo.get_by_id.side_effect = lambda uid: make_profile(uid)
        repo.add_to_list.return_value = True

        await service.follow("alice", "bob")

        repo.add_to_list.assert_has_calls([
            call("alice", "following", "bob"),
            call("bob", "followers", "alice"),
        ])
        notifications.create_notification.assert_awaited_once()
        args = notifications.create_notification.await_args
        assert args.args[0] == "bob"
        assert args.args[1] == NotificationType.NEW_FOLLOWER
        assert args.kwargs["sender_id"] == "alice"

    @pytest.mark.asyncio
    async def test_repeat_follow_does_not_notify(self, service, repo, notifications):
        repo.get_by_id.side_effect = lambda uid: make_profile(uid)
        repo.add_to_list.return_value = False
        await service.follow("alice", "bob")
        notifications.create_notification.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cannot_follow_self(self, service, repo):
        with pytest.raises(SelfRelationError):
            await service.follow("alice", "alice")
        repo.add_to_list.assert_not_called()

    @pytest.mark.asyncio
    async def test_cannot_follow_missing_profile(self, service, repo):
        repo.get_by_id.return_value = None
        with pytest.raises(ProfileNotFoundError):
            await service.follow("alice", "ghost")

    @pytest.mark.asyncio
    async def test_unfollow(self, service, repo):
        await service.unfollow("alice", "bob")
        repo.remove_from_list.assert_has_calls([
            call("alice", "following", "bob"),
            call("bob", "followers", "alice"),
        ])


class TestConnections:
    @pytest.mark.asyncio
    async def test_connect_is_symmetric(self, service, repo):
        repo.get_by_id.side_effect = lambda uid: make_profile(uid)
        await service.connect("alice", "bob")
        repo.add_to_list.assert_has_calls([
            call("alice", "connections", "bob"),
            call("bob", "connections", "alice"),
        ])

    @pytest.mark.asyncio
    async def test_disconnect_is_symmetric(self, service, repo):
        await service.disconnect("alice", "bob")
        repo.remove_from_list.assert_has_calls([
            call("alice", "connections", "bob"),
            call("bob", "connections", "alice"),
        ])

    @pytest.mark.asyncio
    async def test_cannot_disconnect_self(self, service):
        with pytest.raises(SelfRelationError):
            await service.disconnect("alice", "alice")


class TestPrivacy:
    @pytest.mark.asyncio
    async def test_get_privacy(self, service, repo):
        repo.get_privacy.return_value = PrivacySettings(allow_messages=False)
        settings = await service.get_privacy("alice")
        assert settings.allow_messages is False

    @pytest.mark.asyncio
    async def test_update_privacy(self, service, repo):
        repo.get_privacy.return_value = PrivacySettings()
        new = PrivacySettings(allow_connections=False)
        assert await service.update_privacy("alice", new) == new
        repo.save_privacy.assert_called_once_with("alice", new)

    @pytest.mark.asyncio
    async def test_privacy_of_missing_profile(self, service, repo):
        repo.get_privacy.return_value = None
        with pytest.raises(ProfileNotFoundError):
            await service.update_privacy("ghost", PrivacySettings())
        repo.save_privacy.assert_not_called()


class TestPresence:
    @pytest.mark.asyncio
    async def test_update_presence(self, service, repo):
        repo.get_by_id.return_value = make_profile("alice")
        repo.upsert_presence.return_value = Presence(user_id="alice", online=True, last_seen=BASE_TIME)

        presence = await service.update_presence("alice", True)

        assert presence.online is True
        repo.upsert_presence.assert_called_once_with("alice", True)

    @pytest.mark.asyncio
    async def test_update_presence_without_profile(self, service, repo):
        repo.get_by_id.return_value = None
        with pytest.raises(ProfileNotFoundError):
            await service.update_presence("ghost", True)
        repo.upsert_presence.assert_not_called()

    @pytest.mark.asyncio
    async def test_hidden_status_reads_as_offline_to_others(self, service, repo):
        repo.get_by_id.return_value = make_profile(
            "alice", privacy=PrivacySettings(show_online_status=False, show_last_active=False)
        )
        repo.get_presence.return_value = Presence(user_id="alice", online=True, last_seen=BASE_TIME)

        presence = await service.get_presence("alice", "bob")

        assert presence.online is False
        assert presence.last_seen is None

    @pytest.mark.asyncio
    async def test_owner_sees_own_status(self, service, repo):
        repo.get_by_id.return_value = make_profile(
            "alice", privacy=PrivacySettings(show_online_status=False)
        )
        repo.get_presence.return_value = Presence(user_id="alice", online=True, last_seen=BASE_TIME)

        presence = await service.get_presence("alice", "alice")

        assert presence.online is True
        assert presence.last_seen == BASE_TIME

    @pytest.mark.asyncio
    async def test_last_seen_hidden_alone(self, service, repo):
        repo.get_by_id.return_value = make_profile(
            "alice", privacy=PrivacySettings(show_last_active=False)
        )
        repo.get_presence.return_value = Presence(user_id="alice", online=True, last_seen=BASE_TIME)

        presence = await service.get_presence("alice", "bob")

        assert presence.online is True
        assert presence.last_seen is None

    @pytest.mark.asyncio
    async def test_never_seen_user_is_offline(self, service, repo):
        repo.get_by_id.return_value = make_profile("alice")
        repo.get_presence.return_value = None

        presence = await service.get_presence("alice", "bob")

        assert presence == Presence(user_id="alice")


class TestDeleteAccount:
    @pytest.mark.asyncio
    async def test_deletes_everything_in_order(self, service, repo, notifications, posts, media, auth):
        repo.get_by_id.return_value = make_profile("alice", photo_url="https://cdn/x/avatar.jpg")
        repo.find_referencing.side_effect = lambda field, uid: {
            "followers": ["bob"],
            "following": [],
            "connections": ["carol"],
        }[field]

        await service.delete_account("alice")

        notifications.delete_for_user.assert_awaited_once_with("alice")
        posts.delete_posts_by_author.assert_awaited_once_with("alice")
        repo.remove_from_list.assert_has_calls([
            call("bob", "followers", "alice"),
            call("carol", "connections", "alice"),
        ])
        media.destroy_url.assert_awaited_once_with("https://cdn/x/avatar.jpg")
        repo.delete_presence.assert_called_once_with("alice")
        repo.delete.assert_called_once_with("alice")
        auth.delete_auth_user.assert_awaited_once_with("alice")

    @pytest.mark.asyncio
    async def test_presence_failure_does_not_stop_deletion(self, service, repo, auth):
        repo.get_by_id.return_value = make_profile("alice")
        repo.find_referencing.return_value = []
        repo.delete_presence.side_effect = RuntimeError("presence down")

        await service.delete_account("alice")

        repo.delete.assert_called_once_with("alice")
        auth.delete_auth_user.assert_awaited_once_with("alice")

    @pytest.mark.asyncio
    async def test_no_photo_skips_media(self, service, repo, media):
        repo.get_by_id.return_value = make_profile("alice")
        repo.find_referencing.return_value = []
        await service.delete_account("alice")
        media.destroy_url.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_profile(self, service, repo, auth):
        repo.get_by_id.return_value = None
        with pytest.raises(ProfileNotFoundError):
            await service.delete_account("ghost")
        auth.delete_auth_user.assert_not_awaited()
