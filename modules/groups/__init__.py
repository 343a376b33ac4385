"""
Groups module.

Sport groups with members and admins, and a group chat with a polling
message stream.
"""

from .interfaces import IGroupService
from .models import Group, GroupMessage
from .exceptions import (
    GroupFullError,
    GroupNotFoundError,
    LastGroupAdminError,
    NotGroupAdminError,
    NotGroupMemberError,
)

__all__ = [
    "IGroupService",
    "Group",
    "GroupMessage",
    "GroupFullError",
    "GroupNotFoundError",
    "LastGroupAdminError",
    "NotGroupAdminError",
    "NotGroupMemberError",
]
