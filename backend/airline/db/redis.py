"""
Async Redis connection used by the flight search cache.

    redis = await get_redis()
"""
import redis.asyncio as aioredis

from airline.config import settings

_client: aioredis.Redis | None = None


async def get_redis() -> aioredis.Redis:
    """Lazily create and return the shared client."""
    global _client
    if _client is None:
        _client = aioredis.from_url(settings.redis_url, decode_responses=True)
    return _client


async def ping_redis() -> None:
    """Fail fast at startup if Redis is unreachable."""
    client = await get_redis()
    await client.ping()


async def close_redis() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
