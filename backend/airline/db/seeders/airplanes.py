"""
Airplane fixtures for development and test databases.

AIRPLANES is the single source of truth: ``up`` inserts it and ``down``
deletes by the model numbers it lists, so the two can never drift.
"""
from sqlalchemy import delete, insert
from sqlalchemy.ext.asyncio import AsyncSession

from airline.models.airplane import Airplane
from airline.models.mixins import utcnow

# (modelNumber, capacity)
AIRPLANES: list[tuple[str, int]] = [
    ("airbus388", 900),
    ("airbus389", 500),
]


def model_numbers() -> list[str]:
    return [model_number for model_number, _ in AIRPLANES]


async def up(session: AsyncSession) -> int:
    """Insert every fixture row in one statement; a duplicate key propagates."""
    now = utcnow()
    rows = [
        {"model_number": model_number, "capacity": capacity, "created_at": now, "updated_at": now}
        for model_number, capacity in AIRPLANES
    ]
    await session.execute(insert(Airplane), rows)
    await session.commit()
    return len(rows)


async def down(session: AsyncSession) -> int:
    """Delete the fixture rows by model number; rows already gone are fine."""
    result = await session.execute(
        delete(Airplane).where(Airplane.model_number.in_(model_numbers()))
    )
    await session.commit()
    return result.rowcount
