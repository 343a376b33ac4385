"""
Profile API endpoints.

Static paths (``/me``, ``/search``) are declared before ``/{user_id}`` so
they are not captured by the path parameter.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_profile_service
from shared.models import AuthenticatedUser

from .interfaces import IProfileService
from .models import (
    CreateProfileRequest,
    Presence,
    PresenceUpdate,
    PrivacySettings,
    Profile,
    ProfileSearchResponse,
    UpdateProfileRequest,
    UserRole,
)

router = APIRouter()


@router.post("", response_model=Profile, status_code=201)
async def register_profile(
    request: CreateProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """Create the caller's profile after sign-up."""
    return await service.create_profile(user.id, user.email, request)


@router.get("/me", response_model=Profile)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    profile = await service.get_profile(user.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.patch("/me", response_model=Profile)
async def update_my_profile(
    request: UpdateProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.update_profile(user.id, request)


@router.delete("/me", status_code=204)
async def delete_my_account(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> None:
    """Delete the caller's account and everything that references it."""
    await service.delete_account(user.id)


@router.get("/me/privacy", response_model=PrivacySettings)
async def get_my_privacy(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> PrivacySettings:
    return await service.get_privacy(user.id)


@router.put("/me/privacy", response_model=PrivacySettings)
async def update_my_privacy(
    settings: PrivacySettings,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> PrivacySettings:
    return await service.update_privacy(user.id, settings)


@router.put("/me/presence", response_model=Presence)
async def update_my_presence(
    request: PresenceUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Presence:
    """Mark the caller online or offline."""
    return await service.update_presence(user.id, request.online)


@router.get("/search", response_model=ProfileSearchResponse)
async def search_profiles(
    q: str = Query(default="", max_length=100),
    role: Optional[UserRole] = Query(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> ProfileSearchResponse:
    profiles = await service.search_profiles(q, role)
    return ProfileSearchResponse(profiles=profiles, total=len(profiles))


@router.get("/{user_id}", response_model=Profile)
async def get_profile(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    profile = await service.get_profile_for_viewer(user_id, user.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post("/{user_id}/follow", status_code=204)
async def follow(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> None:
    await service.follow(user.id, user_id)


@router.delete("/{user_id}/follow", status_code=204)
async def unfollow(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> None:
    await service.unfollow(user.id, user_id)


@router.delete("/{user_id}/connection", status_code=204)
async def disconnect(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> None:
    await service.disconnect(user.id, user_id)


@router.get("/{user_id}/presence", response_model=Presence)
async def get_presence(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Presence:
    return await service.get_presence(user_id, user.id)
