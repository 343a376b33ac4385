"""
Verification service implementations.

``VerificationService`` owns onboarding status and document review;
``PhoneVerificationService`` wraps the SMS gateway.
"""

import asyncio
import logging
import re
import uuid
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser
from shared.polling import Poller
from modules.auth.interfaces import IAuthService
from modules.auth.state import (
    SessionState,
    set_initializing,
    set_profile,
    set_user,
    update_email_verification,
)
from modules.profiles.models import Profile
from modules.profiles.repository import ProfileRepository
from modules.profiles.exceptions import ProfileNotFoundError

from .interfaces import IPhoneVerificationService, IVerificationService
from .models import (
    DocumentType,
    OnboardingStatus,
    OnboardingStep,
    ReviewStatus,
    SubmitVerificationRequest,
    VerificationDocument,
    VerificationRequest,
    VerificationStats,
)
from .onboarding import onboarding_status
from .repository import VerificationRepository
from .sms import TwilioVerifyClient
from .exceptions import (
    InvalidCodeFormatError,
    InvalidPhoneFormatError,
    VerificationAccessDeniedError,
    VerificationRequestNotFoundError,
)

logger = logging.getLogger(__name__)

E164_PATTERN = re.compile(r"^\+[1-9]\d{1,14}$")
CODE_PATTERN = re.compile(r"^\d{6}$")

SECONDS_PER_HOUR = 3600


def average_review_hours(requests: list[VerificationRequest]) -> float:
    """
    Mean time from submission to review, in hours.

    Requests without a review timestamp count towards the divisor but add
    no time.
    """
    if not requests:
        return 0.0
    total = sum(
        (r.reviewed_at - r.submitted_at).total_seconds()
        for r in requests
        if r.reviewed_at is not None
    )
    return total / len(requests) / SECONDS_PER_HOUR


class VerificationService(IVerificationService):
    """Onboarding status and document verification backed by Supabase."""

    def __init__(
        self,
        repository: VerificationRepository,
        profiles: ProfileRepository,
        auth: IAuthService,
        settings: Optional[Settings] = None,
    ):
        self._repo = repository
        self._profiles = profiles
        self._auth = auth
        self._settings = settings or get_settings()

    # -------------------------------------------------------------------------
    # Onboarding
    # -------------------------------------------------------------------------

    async def _check(self, user_id: str) -> tuple[bool, Optional[Profile]]:
        verified = await self._auth.is_email_verified(user_id)
        profile = await asyncio.to_thread(self._profiles.get_by_id, user_id)
        if verified and profile is not None and not profile.email_verified:
            await asyncio.to_thread(self._profiles.update, profile.id, {"email_verified": True})
        return verified, profile

    def _apply_check(
        self,
        state: SessionState,
        verified: bool,
        profile: Profile,
    ) -> SessionState:
        state = set_profile(state, profile)
        state = update_email_verification(state, verified)
        return set_initializing(state, False)

    async def get_onboarding_status(self, user: AuthenticatedUser) -> OnboardingStatus:
        verified, profile = await self._check(user.id)
        if profile is None:
            raise ProfileNotFoundError(user.id)
        state = self._apply_check(set_user(SessionState(), user), verified, profile)
        status = onboarding_status(state)
        if status is None:
            raise ProfileNotFoundError(user.id)
        return status

    async def watch_onboarding(self, user: AuthenticatedUser) -> AsyncIterator[OnboardingStatus]:
        state = set_user(SessionState(), user)
        last_step: Optional[OnboardingStep] = None

        async def check() -> tuple[bool, Optional[Profile]]:
            return await self._check(user.id)

        poller = Poller(check, self._settings.email_verification_poll_interval)
        async with poller:
            async for verified, profile in poller:
                if profile is None:
                    logger.warning(f"Onboarding watch for {user.id} ended: no profile")
                    break

                state = self._apply_check(state, verified, profile)
                status = onboarding_status(state)
                if status is None:
                    continue
                if status.step != last_step:
                    last_step = status.step
                    yield status
                if status.step == OnboardingStep.VERIFIED:
                    poller.stop()

    # -------------------------------------------------------------------------
    # Document verification
    # -------------------------------------------------------------------------

    async def submit_request(
        self,
        user_id: str,
        request: SubmitVerificationRequest,
    ) -> VerificationRequest:
        has_student_id = any(d.type == DocumentType.STUDENT_ID for d in request.documents)
        status = ReviewStatus.APPROVED if has_student_id else ReviewStatus.PENDING

        documents = [
            VerificationDocument(
                id=str(uuid.uuid4()),
                type=d.type,
                file_url=d.file_url,
                file_name=d.file_name,
                mime_type=d.mime_type,
                status=status,
            )
            for d in request.documents
        ]
        created = self._repo.create({
            "user_id": user_id,
            "role": request.role.value,
            "status": status.value,
            "documents": [d.model_dump(mode="json") for d in documents],
            "institution_name": request.institution_name,
            "student_id": request.student_id,
            "graduation_year": request.graduation_year,
            "sport": request.sport,
            "position": request.position,
        })

        self._profiles.update(user_id, {
            "verification_status": status.value,
            "is_verified": has_student_id,
        })
        logger.info(f"Verification request {created.id} submitted by {user_id}: {status.value}")
        return created

    async def get_request(self, request_id: str, user_id: str) -> VerificationRequest:
        request = self._repo.get_by_id(request_id)
        if request is None:
            raise VerificationRequestNotFoundError(request_id)
        if request.user_id != user_id:
            raise VerificationAccessDeniedError(request_id, user_id)
        return request

    async def list_user_requests(self, user_id: str) -> list[VerificationRequest]:
        return self._repo.list_for_user(user_id)

    async def list_pending(self, limit: Optional[int] = None) -> list[VerificationRequest]:
        return self._repo.list_by_status(ReviewStatus.PENDING, limit)

    async def review_request(
        self,
        request_id: str,
        admin_id: str,
        decision: str,
        notes: Optional[str] = None,
    ) -> VerificationRequest:
        request = self._repo.get_by_id(request_id)
        if request is None:
            raise VerificationRequestNotFoundError(request_id)

        status = ReviewStatus(decision)
        reviewed_at = datetime.now(timezone.utc)
        documents = [
            d.model_copy(update={
                "status": status,
                "reviewed_by": admin_id,
                "reviewed_at": reviewed_at,
                "review_notes": notes,
            })
            for d in request.documents
        ]

        updated = self._repo.save_review(request_id, status, admin_id, notes, documents)
        if updated is None:
            raise VerificationRequestNotFoundError(request_id)

        self._profiles.update(request.user_id, {
            "verification_status": status.value,
            "is_verified": status == ReviewStatus.APPROVED,
        })
        logger.info(f"Verification request {request_id} {status.value} by {admin_id}")
        return updated

    async def get_stats(self) -> VerificationStats:
        approved = self._repo.list_by_status(ReviewStatus.APPROVED)
        rejected = self._repo.list_by_status(ReviewStatus.REJECTED)
        return VerificationStats(
            total_pending=self._repo.count_by_status(ReviewStatus.PENDING),
            total_approved=len(approved),
            total_rejected=len(rejected),
            average_response_time_hours=average_review_hours(approved + rejected),
        )


class PhoneVerificationService(IPhoneVerificationService):
    """SMS one-time-code verification of the user's phone number."""

    def __init__(self, client: TwilioVerifyClient, profiles: ProfileRepository):
        self._client = client
        self._profiles = profiles

    async def send_code(self, phone_number: str) -> str:
        if not E164_PATTERN.match(phone_number):
            raise InvalidPhoneFormatError()
        return await self._client.send_code(phone_number)

    async def verify_code(self, user_id: str, phone_number: str, code: str) -> bool:
        if not E164_PATTERN.match(phone_number):
            raise InvalidPhoneFormatError()
        if not CODE_PATTERN.match(code):
            raise InvalidCodeFormatError()

        valid = await self._client.check_code(phone_number, code)
        if valid:
            self._profiles.update(user_id, {"phone_number": phone_number, "phone_verified": True})
            logger.info(f"Phone verified for {user_id}")
        return valid
