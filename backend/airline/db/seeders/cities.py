"""City fixtures. ``down`` derives its filter from CITIES, like airplanes."""
from sqlalchemy import delete, insert
from sqlalchemy.ext.asyncio import AsyncSession

from airline.models.city import City
from airline.models.mixins import utcnow

CITIES: list[str] = ["New Delhi", "London", "Tokyo"]


async def up(session: AsyncSession) -> int:
    now = utcnow()
    rows = [{"name": name, "created_at": now, "updated_at": now} for name in CITIES]
    await session.execute(insert(City), rows)
    await session.commit()
    return len(rows)


async def down(session: AsyncSession) -> int:
    """Delete the fixture rows by name; cities still referenced by airports make it fail."""
    result = await session.execute(delete(City).where(City.name.in_(CITIES)))
    await session.commit()
    return result.rowcount
