"""
Groups service implementation.
"""

import asyncio
import logging
from typing import AsyncIterator, Optional

from shared.config import Settings, get_settings
from shared.polling import Poller
from modules.profiles.repository import ProfileRepository
from modules.profiles.exceptions import ProfileNotFoundError

from .interfaces import IGroupService
from .models import CreateGroupRequest, Group, GroupMessage
from .repository import GroupMessageRepository, GroupRepository
from .exceptions import (
    GroupFullError,
    GroupNotFoundError,
    LastGroupAdminError,
    NotGroupAdminError,
    NotGroupMemberError,
)

logger = logging.getLogger(__name__)


def can_see_group(group: Group, user_id: str) -> bool:
    return not group.is_private or group.is_member(user_id)


class GroupService(IGroupService):
    """Groups service backed by Supabase."""

    def __init__(
        self,
        groups: GroupRepository,
        messages: GroupMessageRepository,
        profiles: ProfileRepository,
        settings: Optional[Settings] = None,
    ):
        self._groups = groups
        self._messages = messages
        self._profiles = profiles
        self._settings = settings or get_settings()

    async def create_group(self, creator_id: str, request: CreateGroupRequest) -> Group:
        data = request.model_dump()
        data.update({"creator_id": creator_id, "members": [creator_id], "admins": [creator_id]})
        group = self._groups.create(data)
        logger.info(f"Created group {group.id} for {creator_id}")
        return group

    async def get_group(self, group_id: str, user_id: str) -> Group:
        group = self._groups.get_by_id(group_id)
        if group is None or not can_see_group(group, user_id):
            raise GroupNotFoundError(group_id)
        return group

    async def list_user_groups(self, user_id: str) -> list[Group]:
        return self._groups.list_for_member(user_id)

    async def list_by_sport(self, sport: str, user_id: str) -> list[Group]:
        return [g for g in self._groups.list_by_sport(sport) if can_see_group(g, user_id)]

    async def search_groups(self, term: str, user_id: str) -> list[Group]:
        return [g for g in self._groups.search(term) if can_see_group(g, user_id)]

    async def join_group(self, group_id: str, user_id: str) -> Group:
        group = await self.get_group(group_id, user_id)
        if group.is_member(user_id):
            return group
        return self._add(group, user_id)

    async def add_member(self, group_id: str, admin_id: str, user_id: str) -> Group:
        group = await self.get_group(group_id, admin_id)
        if not group.is_admin(admin_id):
            raise NotGroupAdminError(group_id, admin_id)
        if group.is_member(user_id):
            return group
        if self._profiles.get_by_id(user_id) is None:
            raise ProfileNotFoundError(user_id)
        return self._add(group, user_id)

    async def leave_group(self, group_id: str, user_id: str) -> None:
        group = await self.get_group(group_id, user_id)
        if not group.is_member(user_id):
            return

        remaining = [m for m in group.members if m != user_id]
        if not remaining:
            self._groups.delete(group_id)
            logger.info(f"Deleted group {group_id} after its last member left")
            return
        if group.admins == [user_id]:
            raise LastGroupAdminError(group_id)
        self._groups.remove_member(group_id, user_id)

    async def send_message(self, group_id: str, sender_id: str, content: str) -> GroupMessage:
        await self._require_member(group_id, sender_id)
        message = self._messages.create(group_id, sender_id, content)
        self._groups.touch(group_id)
        return message

    async def get_messages(self, group_id: str, user_id: str) -> list[GroupMessage]:
        await self._require_member(group_id, user_id)
        return self._messages.list_for_group(group_id)

    async def stream_messages(self, group_id: str, user_id: str) -> AsyncIterator[GroupMessage]:
        await self._require_member(group_id, user_id)

        since: Optional[str] = None
        # Ids already emitted at the ``since`` timestamp; the query is inclusive
        seen: set[str] = set()

        async def poll() -> list[GroupMessage]:
            return await asyncio.to_thread(self._messages.list_for_group, group_id, since)

        async with Poller(poll, self._settings.message_poll_interval) as poller:
            async for batch in poller:
                for message in batch:
                    if message.id not in seen:
                        yield message
                if batch:
                    newest = batch[-1].created_at
                    since = newest.isoformat()
                    seen = {m.id for m in batch if m.created_at == newest}

    def _add(self, group: Group, user_id: str) -> Group:
        if group.is_full:
            raise GroupFullError(group.id, group.max_members)
        updated = self._groups.add_member(group.id, user_id)
        if updated is None:
            raise GroupNotFoundError(group.id)
        return updated

    async def _require_member(self, group_id: str, user_id: str) -> Group:
        group = await self.get_group(group_id, user_id)
        if not group.is_member(user_id):
            raise NotGroupMemberError(group_id, user_id)
        return group
