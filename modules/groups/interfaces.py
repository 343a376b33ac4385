"""
Groups module interface.
"""

from typing import AsyncIterator, Protocol, runtime_checkable

from .models import CreateGroupRequest, Group, GroupMessage


@runtime_checkable
class IGroupService(Protocol):
    """
    Interface for sport groups and group chat.

    Private groups are invisible to non-members: lookups raise
    GroupNotFoundError and listings leave them out.
    """

    async def create_group(self, creator_id: str, request: CreateGroupRequest) -> Group:
        ...

    async def get_group(self, group_id: str, user_id: str) -> Group:
        """
        Raises:
            GroupNotFoundError: If it doesn't exist or is private to user_id
        """
        ...

    async def list_user_groups(self, user_id: str) -> list[Group]:
        """Groups the user belongs to, most recently active first."""
        ...

    async def list_by_sport(self, sport: str, user_id: str) -> list[Group]:
        ...

    async def search_groups(self, term: str, user_id: str) -> list[Group]:
        """Match name, description or sport."""
        ...

    async def join_group(self, group_id: str, user_id: str) -> Group:
        """
        Join a public group. Joining twice is a no-op.

        Raises:
            GroupNotFoundError: If it doesn't exist or is private
            GroupFullError: If max_members is reached
        """
        ...

    async def add_member(self, group_id: str, admin_id: str, user_id: str) -> Group:
        """
        Add a user to a group on an admin's behalf; the only way into a private group.

        Raises:
            NotGroupAdminError: If admin_id is a member but not an admin
            ProfileNotFoundError: If user_id has no profile
            GroupFullError: If max_members is reached
        """
        ...

    async def leave_group(self, group_id: str, user_id: str) -> None:
        """
        Raises:
            LastGroupAdminError: If the only admin leaves while members remain
        """
        ...

    async def send_message(self, group_id: str, sender_id: str, content: str) -> GroupMessage:
        """
        Raises:
            NotGroupMemberError: If the sender is not a member
        """
        ...

    async def get_messages(self, group_id: str, user_id: str) -> list[GroupMessage]:
        """Messages oldest first; members only."""
        ...

    def stream_messages(self, group_id: str, user_id: str) -> AsyncIterator[GroupMessage]:
        """
        Poll a group's chat and yield each message once, oldest first.

        Runs until the consumer stops iterating.
        """
        ...
