"""
Admin module.

User management, content reports and platform statistics for admins.
"""

from .interfaces import IAdminService
from .models import AdminStats, ReportPage, UserPage
from .exceptions import ReportNotFoundError

__all__ = [
    "IAdminService",
    "AdminStats",
    "ReportPage",
    "UserPage",
    "ReportNotFoundError",
]
