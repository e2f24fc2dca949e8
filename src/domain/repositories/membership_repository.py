"""Membership repository protocol."""

from typing import Protocol


class IMembershipRepository(Protocol):
    """Repository interface for group member sets and user group pointers."""

    async def add_member(self, group_id: str, user_id: str) -> None:
        """Add a user to the group's member set."""
        ...

    async def remove_member(self, group_id: str, user_id: str) -> None:
        """Remove a user from the group's member set."""
        ...

    async def is_member(self, group_id: str, user_id: str) -> bool:
        """Check whether the user is in the group's member set."""
        ...

    async def get_members(self, group_id: str) -> set[str]:
        """Get all user ids in the group's member set."""
        ...

    async def delete_members(self, group_id: str) -> None:
        """Drop the group's member set entirely."""
        ...

    async def get_user_group(self, user_id: str) -> str | None:
        """Get the id of the user's current group, if any."""
        ...

    async def set_user_group(self, user_id: str, group_id: str) -> None:
        """Point the user at ``group_id`` as their current group."""
        ...

    async def delete_user_group(self, user_id: str) -> None:
        """Clear the user's current group pointer."""
        ...
