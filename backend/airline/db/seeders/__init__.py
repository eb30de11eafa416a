"""
Reversible data fixtures (seeds) for development and test databases.

Each seed module exposes ``up(session)`` and ``down(session)``. Seeds run
one at a time, each fully awaited before the next starts: ``apply_all`` in
registration order, ``revert_all`` in reverse. A store error (e.g. a
duplicate key on ``up``) aborts the run.

CMD=python -m airline.db.seeders up [airplanes cities]
"""
import logging
from types import ModuleType

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from airline.db.database import async_session_maker
from airline.db.seeders import airplanes, cities

logger = logging.getLogger(__name__)

SEEDERS: dict[str, ModuleType] = {
    "airplanes": airplanes,
    "cities": cities,
}


def resolve(names: list[str] | None = None) -> list[str]:
    """Validate seed names and return them in registration order."""
    if not names:
        return list(SEEDERS)
    unknown = sorted(set(names) - set(SEEDERS))
    if unknown:
        raise ValueError(f"Unknown seed(s): {', '.join(unknown)}. Available: {', '.join(SEEDERS)}")
    return [name for name in SEEDERS if name in names]


async def apply_all(
    names: list[str] | None = None,
    session_maker: async_sessionmaker[AsyncSession] = async_session_maker,
) -> dict[str, int]:
    inserted = {}
    for name in resolve(names):
        async with session_maker() as session:
            inserted[name] = await SEEDERS[name].up(session)
        logger.info("Seed %s applied: %d rows inserted", name, inserted[name])
    return inserted


async def revert_all(
    names: list[str] | None = None,
    session_maker: async_sessionmaker[AsyncSession] = async_session_maker,
) -> dict[str, int]:
    deleted = {}
    for name in reversed(resolve(names)):
        async with session_maker() as session:
            deleted[name] = await SEEDERS[name].down(session)
        logger.info("Seed %s reverted: %d rows deleted", name, deleted[name])
    return deleted
