"""
Groups module data models.

Column names match the ``groups`` and ``group_messages`` tables.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Group(BaseModel):
    """A sport group. The creator starts as its only member and admin."""

    id: str
    name: str
    description: str = ""
    sport: str = ""
    creator_id: str
    members: list[str] = Field(default_factory=list)
    admins: list[str] = Field(default_factory=list)
    photo_url: Optional[str] = None
    is_private: bool = False
    max_members: Optional[int] = None
    rules: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)

    def is_member(self, user_id: str) -> bool:
        return user_id in self.members

    def is_admin(self, user_id: str) -> bool:
        return user_id in self.admins

    @property
    def is_full(self) -> bool:
        return self.max_members is not None and len(self.members) >= self.max_members


class GroupMessage(BaseModel):
    id: str
    group_id: str
    sender_id: str
    content: str
    created_at: datetime = Field(default_factory=_utc_now)


class CreateGroupRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="", max_length=2000)
    sport: str = Field(..., min_length=1, max_length=50)
    photo_url: Optional[str] = None
    is_private: bool = False
    max_members: Optional[int] = Field(None, ge=2)
    rules: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class AddMemberRequest(BaseModel):
    user_id: str = Field(..., min_length=1)


class SendGroupMessageRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)


class GroupListResponse(BaseModel):
    groups: list[Group]


class GroupMessageListResponse(BaseModel):
    messages: list[GroupMessage]
