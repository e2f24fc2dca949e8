"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.group_service import GroupService
from infrastructure.redis.client import get_redis_client
from infrastructure.redis.redis_uow import RedisUnitOfWork


def get_uow_factory() -> Callable[[], RedisUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> RedisUnitOfWork:
        return RedisUnitOfWork(get_redis_client())

    return factory


@lru_cache
def get_group_service() -> GroupService:
    """Get Group service instance."""
    return GroupService(get_uow_factory())
