"""
Profiles module data models.

A profile is the user record: identity, role, verification flags, privacy
settings, the follow/connection graph and role-specific details.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Account role chosen at registration."""

    ATHLETE = "athlete"
    COACH = "coach"
    TEAM = "team"
    SPONSOR = "sponsor"
    MEDIA = "media"
    COLLEGE = "college"


class VerificationStatus(str, Enum):
    """Identity verification status stored on the profile."""

    NONE = "none"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class FieldVisibility(str, Enum):
    """Who may see a profile field."""

    PUBLIC = "public"
    CONNECTIONS = "connections"
    PRIVATE = "private"


class SocialLinks(BaseModel):
    instagram: str = ""
    twitter: str = ""
    linkedin: str = ""
    youtube: str = ""


class PrivacySettings(BaseModel):
    """Per-user privacy preferences."""

    profile_visibility: FieldVisibility = FieldVisibility.PUBLIC
    email_visibility: FieldVisibility = FieldVisibility.CONNECTIONS
    phone_visibility: FieldVisibility = FieldVisibility.PRIVATE
    achievements_visibility: FieldVisibility = FieldVisibility.PUBLIC
    stats_visibility: FieldVisibility = FieldVisibility.CONNECTIONS
    sponsorship_visibility: FieldVisibility = FieldVisibility.PUBLIC
    allow_messages: bool = True
    allow_connections: bool = True
    show_online_status: bool = True
    show_last_active: bool = True
    allow_profile_search: bool = True


class MonthlyProgress(BaseModel):
    month: str
    value: float = 0


class AthleteDetails(BaseModel):
    """Athlete-specific profile fields."""

    sport: str = ""
    position: str = ""
    school: str = ""
    team: str = ""
    date_of_birth: Optional[str] = None
    height: str = ""
    weight: str = ""
    games_played: int = 0
    goals: int = 0
    assists: int = 0
    points: int = 0
    monthly_progress: list[MonthlyProgress] = Field(default_factory=list)
    career_stats: str = ""
    awards: str = ""
    training_schedule: str = ""
    videos: list[str] = Field(default_factory=list)


class CoachDetails(BaseModel):
    """Coach-specific profile fields."""

    specialization: str = ""
    certifications: str = ""
    achievements: str = ""
    philosophy: str = ""
    experience: str = ""
    scouted_athletes: list[str] = Field(default_factory=list)


class TeamDetails(BaseModel):
    """Team and college program fields."""

    affiliation: str = ""
    roster: str = ""
    recent_matches: str = ""
    record: str = ""
    recruiting_status: str = ""
    upcoming_tryouts: str = ""


class SponsorDetails(BaseModel):
    """Sponsor and media organisation fields."""

    industry: str = ""
    company_bio: str = ""
    sponsorship_programs: str = ""
    active_campaigns: str = ""
    collaborations: str = ""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Profile(BaseModel):
    """
    Full user profile.

    Missing columns are filled with defaults when mapping rows, so older
    records without newer fields still load.
    """

    id: str = Field(..., description="User ID (UUID, same as auth user)")
    email: str = Field(default="", description="Email address")
    display_name: str = Field(default="", description="Display name")
    photo_url: Optional[str] = Field(None, description="Avatar URL")
    role: UserRole = Field(default=UserRole.ATHLETE, description="Account role")
    bio: str = ""
    location: str = ""

    # Verification
    phone_number: Optional[str] = None
    phone_verified: bool = False
    email_verified: bool = False
    verification_status: VerificationStatus = VerificationStatus.NONE
    is_verified: bool = False
    is_admin: bool = False

    social_links: SocialLinks = Field(default_factory=SocialLinks)
    privacy: PrivacySettings = Field(default_factory=PrivacySettings)

    # Social graph
    followers: list[str] = Field(default_factory=list)
    following: list[str] = Field(default_factory=list)
    connections: list[str] = Field(default_factory=list)

    # Role-specific details
    athlete: Optional[AthleteDetails] = None
    coach: Optional[CoachDetails] = None
    team: Optional[TeamDetails] = None
    sponsor: Optional[SponsorDetails] = None

    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)
    last_login: Optional[datetime] = None


class ProfileSummary(BaseModel):
    """Compact author/sender card embedded in other responses."""

    id: str
    display_name: str = ""
    photo_url: Optional[str] = None
    role: UserRole = UserRole.ATHLETE
    is_verified: bool = False

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileSummary":
        return cls(
            id=profile.id,
            display_name=profile.display_name,
            photo_url=profile.photo_url,
            role=profile.role,
            is_verified=profile.is_verified,
        )


class CreateProfileRequest(BaseModel):
    """Profile fields collected at registration. Email comes from the token."""

    display_name: str = Field(..., min_length=1, max_length=100)
    role: UserRole
    photo_url: Optional[str] = None
    bio: str = Field(default="", max_length=2000)
    location: str = ""


class UpdateProfileRequest(BaseModel):
    """
    Partial profile update.

    Relation lists, admin and verification flags change only through
    their own operations.
    """

    display_name: Optional[str] = Field(None, min_length=1, max_length=100)
    photo_url: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=2000)
    location: Optional[str] = None
    social_links: Optional[SocialLinks] = None
    athlete: Optional[AthleteDetails] = None
    coach: Optional[CoachDetails] = None
    team: Optional[TeamDetails] = None
    sponsor: Optional[SponsorDetails] = None


class ProfileSearchResponse(BaseModel):
    profiles: list[ProfileSummary]
    total: int


class Presence(BaseModel):
    """Online status from the ``presence`` table."""

    user_id: str
    online: bool = False
    last_seen: Optional[datetime] = None


class PresenceUpdate(BaseModel):
    online: bool
