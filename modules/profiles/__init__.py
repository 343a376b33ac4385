"""
Profiles module.

User profiles, privacy settings, the follow/connection graph and account
deletion.

Public API:
- IProfileService: Interface for profile operations
- Profile, ProfileSummary, PrivacySettings, UserRole
- Profile exceptions
"""

from .interfaces import IProfileService
from .models import (
    PrivacySettings,
    Profile,
    ProfileSummary,
    UserRole,
    VerificationStatus,
)
from .exceptions import ProfileAlreadyExistsError, ProfileNotFoundError, SelfRelationError

__all__ = [
    "IProfileService",
    "PrivacySettings",
    "Profile",
    "ProfileSummary",
    "UserRole",
    "VerificationStatus",
    "ProfileAlreadyExistsError",
    "ProfileNotFoundError",
    "SelfRelationError",
]
