"""Redis Unit of Work implementation."""

from typing import Any, Optional

from redis.asyncio import Redis

from core.config import settings
from infrastructure.redis.repositories.redis_group_repo import RedisGroupRepository
from infrastructure.redis.repositories.redis_membership_repo import RedisMembershipRepository


class RedisUnitOfWork:
    """Unit of Work implementation using a Redis client.

    Commands are sent as they are issued; the unit only scopes repository
    access to one client.
    """

    def __init__(self, client: Redis, key_prefix: Optional[str] = None) -> None:
        self._client = client
        self._key_prefix = key_prefix or settings.group_key_prefix
        self._active = False

    @property
    def groups(self) -> RedisGroupRepository:
        """Get group repository."""
        if not self._active:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return RedisGroupRepository(self._client, self._key_prefix)

    @property
    def memberships(self) -> RedisMembershipRepository:
        """Get membership repository."""
        if not self._active:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return RedisMembershipRepository(self._client)

    async def __aenter__(self) -> "RedisUnitOfWork":
        """Enter the context manager."""
        self._active = True
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager."""
        self._active = False
