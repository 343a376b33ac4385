"""
Verification module.

Onboarding progression (email -> phone -> documents), SMS one-time codes
and document-based identity verification.
"""

from .interfaces import IPhoneVerificationService, IVerificationService
from .models import (
    DocumentType,
    OnboardingStatus,
    OnboardingStep,
    ReviewStatus,
    VerificationRequest,
    VerificationStats,
)
from .onboarding import derive_onboarding_step

__all__ = [
    "IPhoneVerificationService",
    "IVerificationService",
    "DocumentType",
    "OnboardingStatus",
    "OnboardingStep",
    "ReviewStatus",
    "VerificationRequest",
    "VerificationStats",
    "derive_onboarding_step",
]
