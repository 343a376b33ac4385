"""
Session state and its reducers.

``SessionState`` is immutable; every reducer returns a new state. The
onboarding watcher folds poll results through these reducers instead of
mutating a shared store.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from modules.profiles.models import Profile
from shared.models import AuthenticatedUser


class SessionState(BaseModel):
    """Authentication state of one client session."""

    model_config = ConfigDict(frozen=True)

    user: Optional[AuthenticatedUser] = None
    profile: Optional[Profile] = None
    loading: bool = True
    error: Optional[str] = None
    is_authenticated: bool = False
    email_verified: bool = False
    initializing: bool = True


def set_user(state: SessionState, user: Optional[AuthenticatedUser]) -> SessionState:
    """Set the signed-in user; clearing the user also clears the profile."""
    update = {
        "user": user,
        "is_authenticated": user is not None,
        "email_verified": bool(user and user.email_verified),
    }
    if user is None:
        update["profile"] = None
    return state.model_copy(update=update)


def set_profile(state: SessionState, profile: Optional[Profile]) -> SessionState:
    """
    Store the user's profile.

    When a user is signed in, identity and verification come from the user
    and never from the profile record.
    """
    if profile is not None and state.user is not None:
        profile = profile.model_copy(
            update={
                "id": state.user.id,
                "email_verified": state.user.email_verified,
                "is_admin": profile.is_admin or False,
                "followers": list(profile.followers or []),
                "following": list(profile.following or []),
                "connections": list(profile.connections or []),
            }
        )
    return state.model_copy(update={"profile": profile})


def set_loading(state: SessionState, loading: bool) -> SessionState:
    update: dict = {"loading": loading}
    if loading:
        update["error"] = None
    return state.model_copy(update=update)


def set_error(state: SessionState, error: Optional[str]) -> SessionState:
    return state.model_copy(update={"error": error, "loading": False})


def clear_user(state: SessionState) -> SessionState:
    """Reset to signed out; initialisation is finished."""
    return SessionState(loading=False, initializing=False)


def update_email_verification(state: SessionState, verified: bool) -> SessionState:
    update: dict = {"email_verified": verified}
    if state.user is not None:
        update["user"] = state.user.model_copy(update={"email_verified": verified})
    if state.profile is not None:
        update["profile"] = state.profile.model_copy(update={"email_verified": verified})
    return state.model_copy(update=update)


def set_initializing(state: SessionState, initializing: bool) -> SessionState:
    update: dict = {"initializing": initializing}
    if not initializing:
        update["loading"] = False
    return state.model_copy(update=update)
