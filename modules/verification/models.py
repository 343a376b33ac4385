"""
Verification module data models.

Covers the onboarding progression, SMS one-time codes and document-based
identity verification requests.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from modules.profiles.models import UserRole, VerificationStatus


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Onboarding
# =============================================================================


class OnboardingStep(str, Enum):
    """Where a user is in account onboarding, in progression order."""

    EMAIL_UNVERIFIED = "email_unverified"
    PHONE_UNVERIFIED = "phone_unverified"
    DOCUMENT_PENDING = "document_pending"
    VERIFIED = "verified"


class OnboardingStatus(BaseModel):
    step: OnboardingStep
    email_verified: bool = False
    phone_verified: bool = False
    verification_status: VerificationStatus = VerificationStatus.NONE


# =============================================================================
# Phone (SMS one-time code)
# =============================================================================


class SendCodeRequest(BaseModel):
    """Body of ``POST /phone/send``; field names match the SMS endpoint contract."""

    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field(default="", alias="phoneNumber")


class VerifyCodeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field(default="", alias="phoneNumber")
    code: str = ""


class SendCodeResponse(BaseModel):
    success: bool = True
    status: str


class VerifyCodeResponse(BaseModel):
    success: bool = True
    valid: bool


class PhoneErrorResponse(BaseModel):
    success: bool = False
    error: str


# =============================================================================
# Document verification
# =============================================================================


class DocumentType(str, Enum):
    STUDENT_ID = "student_id"
    ATHLETE_ID = "athlete_id"
    TRANSCRIPT = "transcript"
    OTHER = "other"


class ReviewStatus(str, Enum):
    """Status of a verification request or one of its documents."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class VerificationDocument(BaseModel):
    id: str
    type: DocumentType
    file_url: str = ""
    file_name: str = ""
    mime_type: str = ""
    uploaded_at: datetime = Field(default_factory=_utc_now)
    status: ReviewStatus = ReviewStatus.PENDING
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    review_notes: Optional[str] = None


class VerificationRequest(BaseModel):
    """A user's request to have their identity verified."""

    id: str
    user_id: str
    role: UserRole
    status: ReviewStatus = ReviewStatus.PENDING
    documents: list[VerificationDocument] = Field(default_factory=list)
    institution_name: str = ""
    student_id: Optional[str] = None
    graduation_year: Optional[str] = None
    sport: Optional[str] = None
    position: Optional[str] = None
    submitted_at: datetime = Field(default_factory=_utc_now)
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    review_notes: Optional[str] = None
    updated_at: datetime = Field(default_factory=_utc_now)


class DocumentUpload(BaseModel):
    """A document already uploaded to the media CDN."""

    type: DocumentType
    file_url: str = Field(..., min_length=1)
    file_name: str = ""
    mime_type: str = ""


class SubmitVerificationRequest(BaseModel):
    role: UserRole
    documents: list[DocumentUpload] = Field(..., min_length=1)
    institution_name: str = Field(..., min_length=1, max_length=200)
    student_id: Optional[str] = None
    graduation_year: Optional[str] = None
    sport: Optional[str] = None
    position: Optional[str] = None


class ReviewRequest(BaseModel):
    decision: Literal["approved", "rejected"]
    notes: Optional[str] = Field(None, max_length=2000)


class VerificationStats(BaseModel):
    total_pending: int = 0
    total_approved: int = 0
    total_rejected: int = 0
    average_response_time_hours: float = 0.0


class VerificationRequestListResponse(BaseModel):
    requests: list[VerificationRequest]
