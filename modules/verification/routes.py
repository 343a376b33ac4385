"""
Verification API endpoints.

The phone endpoints keep the SMS contract: ``{phoneNumber}`` ->
``{success, status}`` and ``{phoneNumber, code}`` -> ``{success, valid}``,
with ``{success: false, error}`` on failure.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sse_starlette.sse import EventSourceResponse

from api.middleware.auth import get_current_user
from api.dependencies import get_phone_verification_service, get_verification_service
from shared.exceptions import SportFwdError, ValidationError
from shared.models import AuthenticatedUser

from .interfaces import IPhoneVerificationService, IVerificationService
from .models import (
    OnboardingStatus,
    PhoneErrorResponse,
    SendCodeRequest,
    SendCodeResponse,
    SubmitVerificationRequest,
    VerificationRequest,
    VerificationRequestListResponse,
    VerifyCodeRequest,
    VerifyCodeResponse,
)
from .exceptions import VerificationAccessDeniedError, VerificationRequestNotFoundError

router = APIRouter()


def phone_error_response(error: SportFwdError, fallback: str) -> JSONResponse:
    """Client errors keep their message; gateway failures get a generic one."""
    if isinstance(error, ValidationError):
        return JSONResponse(status_code=400, content=PhoneErrorResponse(error=error.message).model_dump())
    return JSONResponse(status_code=500, content=PhoneErrorResponse(error=fallback).model_dump())


# -----------------------------------------------------------------------------
# Onboarding
# -----------------------------------------------------------------------------


@router.get("/status", response_model=OnboardingStatus)
async def get_status(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IVerificationService = Depends(get_verification_service),
) -> OnboardingStatus:
    return await service.get_onboarding_status(user)


async def onboarding_event_generator(user: AuthenticatedUser, service: IVerificationService):
    """
    Yields events in the format:
        event: onboarding_step
        data: <status json>
    """
    async for status in service.watch_onboarding(user):
        yield {
            "event": "onboarding_step",
            "data": status.model_dump_json(),
        }


@router.get("/status/stream")
async def stream_status(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IVerificationService = Depends(get_verification_service),
):
    """
    Stream onboarding progress via SSE.

    Sends the current step, then each change; the stream closes once the
    user is verified.
    """
    await service.get_onboarding_status(user)
    return EventSourceResponse(
        onboarding_event_generator(user, service),
        media_type="text/event-stream",
    )


# -----------------------------------------------------------------------------
# Phone
# -----------------------------------------------------------------------------


@router.post(
    "/phone/send",
    response_model=SendCodeResponse,
    responses={400: {"model": PhoneErrorResponse}, 500: {"model": PhoneErrorResponse}},
)
async def send_phone_code(
    request: SendCodeRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPhoneVerificationService = Depends(get_phone_verification_service),
):
    if not request.phone_number:
        return JSONResponse(
            status_code=400,
            content=PhoneErrorResponse(error="Phone number is required").model_dump(),
        )
    try:
        status = await service.send_code(request.phone_number)
    except SportFwdError as e:
        return phone_error_response(e, "Failed to send verification code. Please try again later.")
    return SendCodeResponse(status=status)


@router.post(
    "/phone/verify",
    response_model=VerifyCodeResponse,
    responses={400: {"model": PhoneErrorResponse}, 500: {"model": PhoneErrorResponse}},
)
async def verify_phone_code(
    request: VerifyCodeRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPhoneVerificationService = Depends(get_phone_verification_service),
):
    if not request.phone_number or not request.code:
        return JSONResponse(
            status_code=400,
            content=PhoneErrorResponse(
                error="Phone number and verification code are required"
            ).model_dump(),
        )
    try:
        valid = await service.verify_code(user.id, request.phone_number, request.code)
    except SportFwdError as e:
        return phone_error_response(e, "Failed to verify code. Please try again.")
    return VerifyCodeResponse(valid=valid)


# -----------------------------------------------------------------------------
# Document verification
# -----------------------------------------------------------------------------


@router.post("/requests", response_model=VerificationRequest, status_code=201)
async def submit_request(
    request: SubmitVerificationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IVerificationService = Depends(get_verification_service),
) -> VerificationRequest:
    return await service.submit_request(user.id, request)


@router.get("/requests", response_model=VerificationRequestListResponse)
async def list_my_requests(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IVerificationService = Depends(get_verification_service),
) -> VerificationRequestListResponse:
    return VerificationRequestListResponse(requests=await service.list_user_requests(user.id))


@router.get("/requests/{request_id}", response_model=VerificationRequest)
async def get_request(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IVerificationService = Depends(get_verification_service),
) -> VerificationRequest:
    try:
        return await service.get_request(request_id, user.id)
    except (VerificationRequestNotFoundError, VerificationAccessDeniedError):
        raise HTTPException(status_code=404, detail="Verification request not found")
