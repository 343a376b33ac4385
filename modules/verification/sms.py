"""
Twilio Verify client for SMS one-time codes.

Talks to the Verify v2 REST API with httpx. Transient failures (transport
errors, 5xx) are retried with exponential backoff; gateway rejections are
mapped to typed errors and never retried.
"""

import logging
from typing import Any, Optional

import httpx

from shared.config import Settings, get_settings
from shared.retry import retry_with_backoff

from .exceptions import (
    InvalidPhoneNumberError,
    InvalidVerificationCodeError,
    MaxSendAttemptsError,
    SmsGatewayError,
    SmsGatewayUnavailableError,
    SmsNotConfiguredError,
)

logger = logging.getLogger(__name__)

TWILIO_VERIFY_URL = "https://verify.twilio.com/v2/Services"

# Twilio error codes with their own user-facing message
_GATEWAY_ERRORS = {
    60200: InvalidPhoneNumberError,
    60202: InvalidVerificationCodeError,
    60203: MaxSendAttemptsError,
}


def raise_for_gateway_error(response: httpx.Response) -> None:
    """Translate a failed Verify response into a typed exception."""
    if response.status_code < 400:
        return

    try:
        body: dict[str, Any] = response.json()
    except ValueError:
        body = {}

    error_cls = _GATEWAY_ERRORS.get(body.get("code"))  # type: ignore[arg-type]
    if error_cls is not None:
        raise error_cls()

    message = body.get("message") or response.text or "SMS gateway error"
    if response.status_code >= 500:
        raise SmsGatewayUnavailableError(message, status_code=response.status_code)
    raise SmsGatewayError(message, status_code=response.status_code)


class TwilioVerifyClient:
    """Send and check verification codes through Twilio Verify."""

    def __init__(self, settings: Optional[Settings] = None, timeout: float = 30.0):
        self._settings = settings or get_settings()
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        s = self._settings
        return bool(s.twilio_account_sid and s.twilio_auth_token and s.twilio_verify_service_sid)

    async def send_code(self, phone_number: str) -> str:
        """
        Send a code by SMS.

        Returns:
            The verification status reported by the gateway (e.g. "pending")
        """
        data = await self._post("Verifications", {"To": phone_number, "Channel": "sms"})
        logger.info(f"Verification sent to {phone_number}: {data.get('status')}")
        return str(data.get("status", ""))

    async def check_code(self, phone_number: str, code: str) -> bool:
        """Check a code. Returns True when the gateway approves it."""
        data = await self._post("VerificationCheck", {"To": phone_number, "Code": code})
        return data.get("status") == "approved"

    async def _post(self, resource: str, form: dict[str, str]) -> dict[str, Any]:
        if not self.is_configured:
            raise SmsNotConfiguredError()

        url = f"{TWILIO_VERIFY_URL}/{self._settings.twilio_verify_service_sid}/{resource}"
        auth = (self._settings.twilio_account_sid, self._settings.twilio_auth_token)

        async def call() -> dict[str, Any]:
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.post(url, data=form, auth=auth, timeout=self._timeout)
            except httpx.HTTPError as e:
                raise SmsGatewayUnavailableError(str(e))
            raise_for_gateway_error(response)
            return response.json()

        return await retry_with_backoff(
            call,
            attempts=self._settings.retry_attempts,
            base_delay=self._settings.retry_base_delay,
            retry_on=(SmsGatewayUnavailableError,),
        )
