"""Tests for the session state reducers."""

import pytest
from pydantic import ValidationError

from modules.auth.state import (
    SessionState,
    clear_user,
    set_error,
    set_initializing,
    set_loading,
    set_profile,
    set_user,
    update_email_verification,
)
from modules.profiles.models import Profile
from shared.models import AuthenticatedUser


@pytest.fixture
def user() -> AuthenticatedUser:
    return AuthenticatedUser(id="user-1", email="a@example.com", email_verified=True)


@pytest.fixture
def profile() -> Profile:
    return Profile(
        id="stale-id",
        email="a@example.com",
        display_name="Ada",
        email_verified=False,
        is_admin=True,
        followers=["f1"],
        connections=["c1"],
    )


class TestSessionState:
    def test_initial_state(self):
        state = SessionState()
        assert state.user is None
        assert state.loading is True
        assert state.initializing is True
        assert state.is_authenticated is False

    def test_state_is_immutable(self):
        with pytest.raises(ValidationError):
            SessionState().loading = False


class TestReducers:
    def test_set_user_authenticates(self, user):
        state = set_user(SessionState(), user)
        assert state.is_authenticated is True
        assert state.email_verified is True
        assert state.user == user

    def test_set_user_none_clears_profile(self, user, profile):
        state = set_profile(set_user(SessionState(), user), profile)
        cleared = set_user(state, None)
        assert cleared.profile is None
        assert cleared.is_authenticated is False
        assert cleared.email_verified is False

    def test_set_profile_takes_identity_from_user(self, user, profile):
        state = set_profile(set_user(SessionState(), user), profile)
        assert state.profile.id == "user-1"
        assert state.profile.email_verified is True
        assert state.profile.is_admin is True
        assert state.profile.followers == ["f1"]
        assert state.profile.connections == ["c1"]

    def test_set_profile_without_user_keeps_record(self, profile):
        state = set_profile(SessionState(), profile)
        assert state.profile.id == "stale-id"

    def test_set_loading_true_clears_error(self):
        state = set_error(SessionState(), "boom")
        state = set_loading(state, True)
        assert state.loading is True
        assert state.error is None

    def test_set_loading_false_keeps_error(self):
        state = set_loading(set_error(SessionState(), "boom"), False)
        assert state.error == "boom"

    def test_set_error_stops_loading(self):
        state = set_error(SessionState(), "boom")
        assert state.loading is False
        assert state.error == "boom"

    def test_clear_user_resets_everything(self, user, profile):
        state = set_profile(set_user(SessionState(), user), profile)
        cleared = clear_user(state)
        assert cleared.user is None
        assert cleared.profile is None
        assert cleared.loading is False
        assert cleared.initializing is False

    def test_update_email_verification_updates_user_and_profile(self, profile):
        unverified = AuthenticatedUser(id="user-1", email="a@example.com")
        state = set_profile(set_user(SessionState(), unverified), profile)
        assert state.email_verified is False

        state = update_email_verification(state, True)
        assert state.email_verified is True
        assert state.user.email_verified is True
        assert state.profile.email_verified is True

    def test_set_initializing_false_stops_loading(self):
        state = set_initializing(SessionState(), False)
        assert state.initializing is False
        assert state.loading is False

    def test_reducers_do_not_mutate_input(self, user):
        original = SessionState()
        set_user(original, user)
        assert original.user is None
