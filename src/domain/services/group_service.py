"""Group service layer with business logic."""

from typing import Callable, List, Optional, Set
from uuid import uuid4

import structlog

from core.exceptions import (
    GroupHasChildrenError,
    GroupNotFoundError,
    ParentGroupNotFoundError,
    UserNotFoundError,
)
from domain.entities.group import Group, GroupStatus
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.inheritance import resolve_inheritance

logger = structlog.get_logger()


class GroupService:
    """Service layer for group hierarchy and membership management.

    Every operation is a short series of independent store reads and writes.
    Nothing here is atomic across keys: a ``move_user`` racing another move
    or remove of the same user may leave that user in two member sets, or
    in none.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(
        self,
        name: str,
        parent_uuid: Optional[str] = None,
        display_name: Optional[str] = None,
        status: Optional[GroupStatus] = None,
        space_id: Optional[str] = None,
        location: Optional[str] = None,
        language: Optional[str] = None,
        segments: Optional[List[str]] = None,
    ) -> Group:
        """Create a group. The parent, when given, must already exist."""
        async with self._uow_factory() as uow:
            if parent_uuid:
                parent = await uow.groups.get(parent_uuid)
                if not parent:
                    raise ParentGroupNotFoundError(parent_uuid)

            group = Group(
                uuid=str(uuid4()),
                parent_uuid=parent_uuid or None,
                name=name,
                display_name=display_name if display_name is not None else name,
                status=status if status is not None else GroupStatus.ACTIVE,
                space_id=space_id,
                location=location,
                language=language,
                segments=segments,
            )

            created = await uow.groups.save(group)
            logger.info("group_created", group_id=created.uuid, parent_id=created.parent_uuid)
            return created

    async def get_with_inheritance(self, group_uuid: str) -> Group:
        """Get a group with unset properties resolved from its ancestors."""
        async with self._uow_factory() as uow:
            group = await uow.groups.get(group_uuid)
            if not group:
                raise GroupNotFoundError(group_uuid)

            return await resolve_inheritance(group, uow.groups.get)

    async def update(
        self,
        group_uuid: str,
        name: Optional[str] = None,
        display_name: Optional[str] = None,
        status: Optional[GroupStatus] = None,
        space_id: Optional[str] = None,
        location: Optional[str] = None,
        language: Optional[str] = None,
        segments: Optional[List[str]] = None,
    ) -> Group:
        """Overwrite the stored fields that are given. None means unchanged."""
        async with self._uow_factory() as uow:
            group = await uow.groups.get(group_uuid)
            if not group:
                raise GroupNotFoundError(group_uuid)

            if name is not None:
                group.name = name
            if display_name is not None:
                group.display_name = display_name
            if status is not None:
                group.status = status
            if space_id is not None:
                group.space_id = space_id
            if location is not None:
                group.location = location
            if language is not None:
                group.language = language
            if segments is not None:
                group.segments = segments

            updated = await uow.groups.save(group)
            logger.info("group_updated", group_id=group_uuid)
            return updated

    async def delete(self, group_uuid: str) -> None:
        """Delete a childless group and its member set."""
        async with self._uow_factory() as uow:
            group = await uow.groups.get(group_uuid)
            if not group:
                raise GroupNotFoundError(group_uuid)

            children = await uow.groups.get_children(group_uuid)
            if children:
                raise GroupHasChildrenError(group_uuid)

            # Reverse pointers of former members are left as they are
            await uow.memberships.delete_members(group_uuid)
            await uow.groups.delete(group)
            logger.info("group_deleted", group_id=group_uuid)

    # --- Membership ---

    async def add_user(self, group_uuid: str, user_id: str) -> None:
        """Add a user to a group and make it the user's current group."""
        async with self._uow_factory() as uow:
            await self._require_group(uow, group_uuid)

            await uow.memberships.add_member(group_uuid, user_id)
            await uow.memberships.set_user_group(user_id, group_uuid)
            logger.info("user_added_to_group", user_id=user_id, group_id=group_uuid)

    async def remove_user(self, group_uuid: str, user_id: str) -> None:
        """Remove a user from a group and clear their current group pointer."""
        async with self._uow_factory() as uow:
            await self._require_group(uow, group_uuid)

            if not await uow.memberships.is_member(group_uuid, user_id):
                raise UserNotFoundError(user_id)

            await uow.memberships.remove_member(group_uuid, user_id)
            await uow.memberships.delete_user_group(user_id)
            logger.info("user_removed_from_group", user_id=user_id, group_id=group_uuid)

    async def move_user(self, user_id: str, target_group_uuid: str) -> None:
        """Move a user from their current group (if any) to the target group."""
        async with self._uow_factory() as uow:
            await self._require_group(uow, target_group_uuid)

            current_group_uuid = await uow.memberships.get_user_group(user_id)
            if current_group_uuid:
                await uow.memberships.remove_member(current_group_uuid, user_id)

            await uow.memberships.add_member(target_group_uuid, user_id)
            await uow.memberships.set_user_group(user_id, target_group_uuid)
            logger.info(
                "user_moved",
                user_id=user_id,
                from_group_id=current_group_uuid,
                to_group_id=target_group_uuid,
            )

    async def get_users(self, group_uuid: str) -> Set[str]:
        """Get the ids of all users in a group."""
        async with self._uow_factory() as uow:
            await self._require_group(uow, group_uuid)

            return await uow.memberships.get_members(group_uuid)

    # --- Internal helpers ---

    async def _require_group(self, uow: IUnitOfWork, group_uuid: str) -> Group:
        """Load a group or raise GroupNotFoundError."""
        group = await uow.groups.get(group_uuid)
        if not group:
            raise GroupNotFoundError(group_uuid)
        return group
