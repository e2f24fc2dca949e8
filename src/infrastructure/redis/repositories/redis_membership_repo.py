"""Redis implementation of Membership repository."""

from redis.asyncio import Redis

USER_MEMBERSHIP_KEY = "group:{}:users"
USER_GROUP_KEY = "user:{}:group"


class RedisMembershipRepository:
    """Redis implementation of IMembershipRepository.

    A group's members live in a set; a user's current group is a plain
    string key. The two are written with separate commands.
    """

    def __init__(self, client: Redis) -> None:
        self._client = client

    async def add_member(self, group_id: str, user_id: str) -> None:
        """Add a user to the group's member set."""
        await self._client.sadd(USER_MEMBERSHIP_KEY.format(group_id), user_id)

    async def remove_member(self, group_id: str, user_id: str) -> None:
        """Remove a user from the group's member set."""
        await self._client.srem(USER_MEMBERSHIP_KEY.format(group_id), user_id)

    async def is_member(self, group_id: str, user_id: str) -> bool:
        """Check whether the user is in the group's member set."""
        return bool(await self._client.sismember(USER_MEMBERSHIP_KEY.format(group_id), user_id))

    async def get_members(self, group_id: str) -> set[str]:
        """Get all user ids in the group's member set."""
        members = await self._client.smembers(USER_MEMBERSHIP_KEY.format(group_id))
        return {str(member) for member in members}

    async def delete_members(self, group_id: str) -> None:
        """Drop the group's member set."""
        await self._client.delete(USER_MEMBERSHIP_KEY.format(group_id))

    async def get_user_group(self, user_id: str) -> str | None:
        """Get the id of the user's current group, if any."""
        value = await self._client.get(USER_GROUP_KEY.format(user_id))
        return str(value) if value is not None else None

    async def set_user_group(self, user_id: str, group_id: str) -> None:
        """Point the user at ``group_id`` as their current group."""
        await self._client.set(USER_GROUP_KEY.format(user_id), group_id)

    async def delete_user_group(self, user_id: str) -> None:
        """Clear the user's current group pointer."""
        await self._client.delete(USER_GROUP_KEY.format(user_id))
