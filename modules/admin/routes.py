"""
Admin API endpoints.

Every route requires an admin profile.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.middleware.auth import require_admin
from api.dependencies import get_admin_service, get_verification_service
from shared.models import AuthenticatedUser
from modules.posts.models import Report
from modules.profiles.models import Profile
from modules.verification.interfaces import IVerificationService
from modules.verification.models import (
    ReviewRequest,
    VerificationRequest,
    VerificationRequestListResponse,
    VerificationStats,
)
from modules.verification.exceptions import VerificationRequestNotFoundError

from .interfaces import IAdminService
from .models import (
    AdminStats,
    ReportPage,
    ResolveReportRequest,
    UpdateUserStatusRequest,
    UserPage,
)

router = APIRouter()


@router.get("/stats", response_model=AdminStats)
async def get_stats(
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> AdminStats:
    return await service.get_stats()


@router.get("/users", response_model=UserPage)
async def list_users(
    cursor: Optional[str] = Query(default=None),
    page_size: Optional[int] = Query(default=None, ge=1, le=100),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> UserPage:
    return await service.list_users(cursor, page_size)


@router.patch("/users/{user_id}", response_model=Profile)
async def update_user_status(
    user_id: str,
    request: UpdateUserStatusRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> Profile:
    return await service.update_user_status(user_id, request.is_verified, request.is_admin)


@router.delete("/users/{user_id}", status_code=204)
async def delete_user(
    user_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> None:
    await service.delete_user(user_id)


@router.get("/reports", response_model=ReportPage)
async def list_reports(
    cursor: Optional[str] = Query(default=None),
    page_size: Optional[int] = Query(default=None, ge=1, le=100),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> ReportPage:
    return await service.list_reports(cursor, page_size)


@router.post("/reports/{report_id}/resolve", response_model=Report)
async def resolve_report(
    report_id: str,
    request: ResolveReportRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> Report:
    return await service.resolve_report(report_id, request.resolution)


# -----------------------------------------------------------------------------
# Verification review
# -----------------------------------------------------------------------------


@router.get("/verifications/pending", response_model=VerificationRequestListResponse)
async def list_pending_verifications(
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IVerificationService = Depends(get_verification_service),
) -> VerificationRequestListResponse:
    """Pending verification requests, oldest first."""
    return VerificationRequestListResponse(requests=await service.list_pending(limit))


@router.get("/verifications/stats", response_model=VerificationStats)
async def verification_stats(
    admin: AuthenticatedUser = Depends(require_admin),
    service: IVerificationService = Depends(get_verification_service),
) -> VerificationStats:
    return await service.get_stats()


@router.post("/verifications/{request_id}/review", response_model=VerificationRequest)
async def review_verification(
    request_id: str,
    request: ReviewRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IVerificationService = Depends(get_verification_service),
) -> VerificationRequest:
    try:
        return await service.review_request(request_id, admin.id, request.decision, request.notes)
    except VerificationRequestNotFoundError:
        raise HTTPException(status_code=404, detail="Verification request not found")
