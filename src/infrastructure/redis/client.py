"""Redis connection management."""

from redis.asyncio import ConnectionPool, Redis

from core.config import settings

_pool: ConnectionPool | None = None


def get_connection_pool() -> ConnectionPool:
    """Get the process-wide connection pool, creating it on first use."""
    global _pool
    if _pool is None:
        _pool = ConnectionPool.from_url(
            settings.redis_url,
            decode_responses=True,
            socket_connect_timeout=settings.redis_socket_timeout,
            socket_timeout=settings.redis_socket_timeout,
            max_connections=settings.redis_max_connections,
        )
    return _pool


def get_redis_client() -> Redis:
    """Get a client bound to the shared connection pool."""
    return Redis(connection_pool=get_connection_pool())


async def close_redis() -> None:
    """Disconnect all pooled connections."""
    global _pool
    if _pool is not None:
        await _pool.disconnect()
        _pool = None
