"""
Verification module interfaces.
"""

from typing import AsyncIterator, Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    OnboardingStatus,
    SubmitVerificationRequest,
    VerificationRequest,
    VerificationStats,
)


@runtime_checkable
class IVerificationService(Protocol):
    """Interface for onboarding status and document verification."""

    async def get_onboarding_status(self, user: AuthenticatedUser) -> OnboardingStatus:
        """
        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    def watch_onboarding(self, user: AuthenticatedUser) -> AsyncIterator[OnboardingStatus]:
        """
        Poll the user's onboarding status.

        Yields the status whenever the step changes, starting with the
        current one, and ends once the user is verified.
        """
        ...

    async def submit_request(
        self,
        user_id: str,
        request: SubmitVerificationRequest,
    ) -> VerificationRequest:
        """
        Submit documents for review.

        A request containing a student id document is approved at once;
        otherwise it waits for an admin.
        """
        ...

    async def get_request(self, request_id: str, user_id: str) -> VerificationRequest:
        """
        Raises:
            VerificationRequestNotFoundError: If it doesn't exist
            VerificationAccessDeniedError: If it belongs to someone else
        """
        ...

    async def list_user_requests(self, user_id: str) -> list[VerificationRequest]:
        ...

    async def list_pending(self, limit: Optional[int] = None) -> list[VerificationRequest]:
        """Pending requests, oldest first."""
        ...

    async def review_request(
        self,
        request_id: str,
        admin_id: str,
        decision: str,
        notes: Optional[str] = None,
    ) -> VerificationRequest:
        """Approve or reject a request, its documents and the user's profile."""
        ...

    async def get_stats(self) -> VerificationStats:
        ...


@runtime_checkable
class IPhoneVerificationService(Protocol):
    """Interface for SMS one-time-code phone verification."""

    async def send_code(self, phone_number: str) -> str:
        """
        Send a code. Returns the gateway status.

        Raises:
            InvalidPhoneFormatError: If the number is not E.164
            InvalidPhoneNumberError, MaxSendAttemptsError, SmsGatewayError
        """
        ...

    async def verify_code(self, user_id: str, phone_number: str, code: str) -> bool:
        """
        Check a code; a valid code marks the user's phone as verified.

        Raises:
            InvalidPhoneFormatError, InvalidCodeFormatError,
            InvalidPhoneNumberError, InvalidVerificationCodeError,
            SmsGatewayError
        """
        ...
