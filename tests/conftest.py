"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fakeredis import FakeAsyncRedis, FakeServer
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.services.group_service import GroupService
from infrastructure.redis.redis_uow import RedisUnitOfWork

TEST_KEY_PREFIX = "Group"


@pytest.fixture
async def redis_client() -> AsyncGenerator[FakeAsyncRedis, None]:
    """In-memory Redis client with a fresh server per test."""
    client = FakeAsyncRedis(server=FakeServer(), decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def uow_factory(redis_client: FakeAsyncRedis):
    """Unit of Work factory bound to the in-memory Redis client."""

    def factory() -> RedisUnitOfWork:
        return RedisUnitOfWork(redis_client, key_prefix=TEST_KEY_PREFIX)

    return factory


@pytest.fixture
def group_service(uow_factory) -> GroupService:
    """Group service backed by the in-memory Redis client."""
    return GroupService(uow_factory)


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with no store overrides."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def api_client(
    redis_client: FakeAsyncRedis,
    group_service: GroupService,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to the in-memory Redis store.

    This client:
    - Overrides the group service to use the fake Redis unit of work
    - Overrides the Redis client used by the detailed health check
    """
    from api.v1.dependencies import get_group_service
    from infrastructure.redis.client import get_redis_client
    from main import create_app

    app = create_app()

    app.dependency_overrides[get_group_service] = lambda: group_service
    app.dependency_overrides[get_redis_client] = lambda: redis_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
