"""
Admin service implementation.
"""

import logging
from functools import partial
from typing import Optional

from shared.concurrency import fan_out
from shared.config import Settings, get_settings
from shared.exceptions import ValidationError
from shared.pagination import PageCursor, decode_cursor, encode_cursor
from modules.posts.models import Report, ReportStatus
from modules.posts.repository import ReportRepository
from modules.profiles.interfaces import IProfileService
from modules.profiles.models import Profile
from modules.profiles.repository import ProfileRepository
from modules.profiles.exceptions import ProfileNotFoundError
from modules.verification.models import ReviewStatus
from modules.verification.repository import VerificationRepository

from .interfaces import IAdminService
from .models import AdminStats, ReportPage, UserPage
from .exceptions import ReportNotFoundError

logger = logging.getLogger(__name__)

RESOLUTIONS = {
    "approve": ReportStatus.RESOLVED,
    "reject": ReportStatus.REJECTED,
}


def _after(cursor: Optional[str]) -> Optional[PageCursor]:
    try:
        return decode_cursor(cursor)
    except ValueError:
        raise ValidationError("Invalid page cursor", code="INVALID_CURSOR", details={"cursor": cursor})


class AdminService(IAdminService):
    """Admin service backed by Supabase."""

    def __init__(
        self,
        profiles: ProfileRepository,
        reports: ReportRepository,
        verifications: VerificationRepository,
        profile_service: IProfileService,
        settings: Optional[Settings] = None,
    ):
        self._profiles = profiles
        self._reports = reports
        self._verifications = verifications
        self._profile_service = profile_service
        self._settings = settings or get_settings()

    async def list_users(self, cursor: Optional[str] = None, page_size: Optional[int] = None) -> UserPage:
        size = page_size or self._settings.admin_page_size
        rows = self._profiles.list_page(size, _after(cursor))
        has_more = len(rows) > size
        items = rows[:size]
        return UserPage(
            items=items,
            has_more=has_more,
            next_cursor=encode_cursor(items[-1].created_at, items[-1].id) if has_more else None,
        )

    async def update_user_status(
        self,
        user_id: str,
        is_verified: Optional[bool] = None,
        is_admin: Optional[bool] = None,
    ) -> Profile:
        updates = {
            k: v
            for k, v in {"is_verified": is_verified, "is_admin": is_admin}.items()
            if v is not None
        }
        profile = (
            self._profiles.update(user_id, updates) if updates else self._profiles.get_by_id(user_id)
        )
        if profile is None:
            raise ProfileNotFoundError(user_id)
        logger.info(f"Admin updated status of {user_id}: {updates}")
        return profile

    async def delete_user(self, user_id: str) -> None:
        await self._profile_service.delete_account(user_id)

    async def list_reports(self, cursor: Optional[str] = None, page_size: Optional[int] = None) -> ReportPage:
        size = page_size or self._settings.admin_page_size
        rows = self._reports.list_page(size, _after(cursor))
        has_more = len(rows) > size
        items = rows[:size]
        return ReportPage(
            items=items,
            has_more=has_more,
            next_cursor=encode_cursor(items[-1].created_at, items[-1].id) if has_more else None,
        )

    async def resolve_report(self, report_id: str, resolution: str) -> Report:
        status = RESOLUTIONS.get(resolution)
        if status is None:
            raise ValidationError(
                f"Unknown resolution: {resolution}",
                code="INVALID_RESOLUTION",
                details={"resolution": resolution},
            )
        report = self._reports.set_status(report_id, status)
        if report is None:
            raise ReportNotFoundError(report_id)
        logger.info(f"Report {report_id} {status.value}")
        return report

    async def get_stats(self) -> AdminStats:
        total_users, pending_reports, pending_verifications = await fan_out(
            self._profiles.count,
            partial(self._reports.count_by_status, ReportStatus.PENDING),
            partial(self._verifications.count_by_status, ReviewStatus.PENDING),
        )
        return AdminStats(
            total_users=total_users,
            pending_reports=pending_reports,
            pending_verifications=pending_verifications,
        )
