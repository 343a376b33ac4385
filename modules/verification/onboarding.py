"""
Onboarding progression.

A user moves email_unverified -> phone_unverified -> document_pending ->
verified. The current step is always derived from the profile flags, so
every caller agrees on it.
"""

from typing import Optional

from modules.auth.state import SessionState
from modules.profiles.models import Profile, VerificationStatus

from .models import OnboardingStatus, OnboardingStep


def derive_onboarding_step(profile: Profile, email_verified: Optional[bool] = None) -> OnboardingStep:
    """
    Compute the onboarding step from profile flags.

    Args:
        profile: The user's profile
        email_verified: Authoritative email flag from the auth provider;
            falls back to the profile's copy when omitted
    """
    if email_verified is None:
        email_verified = profile.email_verified
    if not email_verified:
        return OnboardingStep.EMAIL_UNVERIFIED
    if not profile.phone_verified:
        return OnboardingStep.PHONE_UNVERIFIED
    if profile.verification_status != VerificationStatus.APPROVED:
        return OnboardingStep.DOCUMENT_PENDING
    return OnboardingStep.VERIFIED


def onboarding_status(state: SessionState) -> Optional[OnboardingStatus]:
    """Status for a session, or None until its profile is loaded."""
    profile = state.profile
    if profile is None:
        return None
    return OnboardingStatus(
        step=derive_onboarding_step(profile, state.email_verified),
        email_verified=state.email_verified,
        phone_verified=profile.phone_verified,
        verification_status=profile.verification_status,
    )
