"""
Admin module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.posts.models import Report
from modules.profiles.models import Profile

from .models import AdminStats, ReportPage, UserPage


@runtime_checkable
class IAdminService(Protocol):
    """
    Back-office operations.

    Callers must already have checked that the acting user is an admin.
    """

    async def list_users(self, cursor: Optional[str] = None, page_size: Optional[int] = None) -> UserPage:
        """Newest users first."""
        ...

    async def update_user_status(
        self,
        user_id: str,
        is_verified: Optional[bool] = None,
        is_admin: Optional[bool] = None,
    ) -> Profile:
        ...

    async def delete_user(self, user_id: str) -> None:
        """Delete a user account with the full account deletion sequence."""
        ...

    async def list_reports(self, cursor: Optional[str] = None, page_size: Optional[int] = None) -> ReportPage:
        ...

    async def resolve_report(self, report_id: str, resolution: str) -> Report:
        """``approve`` marks the report resolved, ``reject`` marks it rejected."""
        ...

    async def get_stats(self) -> AdminStats:
        ...
