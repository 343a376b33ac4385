"""
Admin module data models.
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field

from shared.models import Page
from modules.posts.models import Report
from modules.profiles.models import Profile


class UserPage(Page):
    items: list[Profile] = Field(default_factory=list)


class ReportPage(Page):
    items: list[Report] = Field(default_factory=list)


class UpdateUserStatusRequest(BaseModel):
    is_verified: Optional[bool] = None
    is_admin: Optional[bool] = None


class ResolveReportRequest(BaseModel):
    resolution: Literal["approve", "reject"]


class AdminStats(BaseModel):
    total_users: int = 0
    pending_reports: int = 0
    pending_verifications: int = 0
