"""
Verification module exceptions.

SMS errors carry the user-facing message returned by the phone endpoints.
"""

from typing import Optional

from shared.exceptions import AuthorizationError, ExternalServiceError, NotFoundError, ValidationError


class VerificationRequestNotFoundError(NotFoundError):
    def __init__(self, request_id: str):
        super().__init__(
            f"Verification request not found: {request_id}",
            code="VERIFICATION_REQUEST_NOT_FOUND",
            details={"request_id": request_id},
        )


class VerificationAccessDeniedError(AuthorizationError):
    def __init__(self, request_id: str, user_id: str):
        super().__init__(
            f"Access denied to verification request: {request_id}",
            code="VERIFICATION_ACCESS_DENIED",
            details={"request_id": request_id, "user_id": user_id},
        )


# -----------------------------------------------------------------------------
# Phone verification
# -----------------------------------------------------------------------------


class InvalidPhoneFormatError(ValidationError):
    def __init__(self):
        super().__init__(
            "Invalid phone number format. Must be in E.164 format (e.g., +1234567890)",
            code="INVALID_PHONE_FORMAT",
        )


class InvalidCodeFormatError(ValidationError):
    def __init__(self):
        super().__init__(
            "Invalid verification code format. Must be 6 digits.",
            code="INVALID_CODE_FORMAT",
        )


class InvalidPhoneNumberError(ValidationError):
    """Gateway rejected the number (Twilio 60200)."""

    def __init__(self):
        super().__init__("Invalid phone number", code="INVALID_PHONE_NUMBER")


class InvalidVerificationCodeError(ValidationError):
    """Gateway rejected the code (Twilio 60202)."""

    def __init__(self):
        super().__init__("Invalid verification code", code="INVALID_VERIFICATION_CODE")


class MaxSendAttemptsError(ValidationError):
    """Too many codes sent to one number (Twilio 60203)."""

    def __init__(self):
        super().__init__(
            "Max send attempts reached. Please try again later.",
            code="MAX_SEND_ATTEMPTS",
        )


class SmsGatewayError(ExternalServiceError):
    """Any other SMS gateway failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message,
            service="twilio",
            code="SMS_GATEWAY_ERROR",
            details={"status_code": status_code},
        )
        self.status_code = status_code


class SmsGatewayUnavailableError(SmsGatewayError):
    """Transport failure or 5xx from the gateway; safe to retry."""


class SmsNotConfiguredError(ExternalServiceError):
    def __init__(self):
        super().__init__(
            "SMS verification is not configured",
            service="twilio",
            code="SMS_NOT_CONFIGURED",
        )
