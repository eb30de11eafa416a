"""
Redis cache for flight search results.

Flow:
    1. current_generation()  -> read once, before querying the DB
    2. get_cached_search()   -> hit? return the serialized flights
    3. save_search()         -> after the DB query, store the results with a TTL
    4. invalidate_searches() -> on every flight write

Keys embed a generation counter: bumping it makes every stored search
unreachable at once, so a write never leaves a stale result behind.
Stale keys simply expire after SEARCH_CACHE_TTL_SECONDS.
"""
import hashlib
import json
import logging

from airline.config import settings
from airline.db.redis import get_redis

logger = logging.getLogger(__name__)

GENERATION_KEY = "flights:search:generation"


def _search_key(generation: int, params: dict) -> str:
    digest = hashlib.sha256(json.dumps(params, sort_keys=True).encode()).hexdigest()
    return f"flights:search:{generation}:{digest}"


async def current_generation() -> int:
    redis = await get_redis()
    return int(await redis.get(GENERATION_KEY) or 0)


async def get_cached_search(generation: int, params: dict) -> list[dict] | None:
    """
    Returns:
        the cached list of serialized flights, or None on a miss.
    """
    redis = await get_redis()
    raw = await redis.get(_search_key(generation, params))
    if raw is None:
        return None
    logger.debug("Search cache hit (generation %d)", generation)
    return json.loads(raw)


async def save_search(generation: int, params: dict, flights: list[dict]) -> None:
    redis = await get_redis()
    await redis.set(
        _search_key(generation, params),
        json.dumps(flights),
        ex=settings.search_cache_ttl_seconds,
    )


async def invalidate_searches() -> None:
    redis = await get_redis()
    generation = await redis.incr(GENERATION_KEY)
    logger.debug("Search cache invalidated, generation is now %d", generation)
