from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from airline.models.city import City
from airline.models.schemas import CityIn
from airline.services.base import apply_changes, commit_or_conflict, get_or_404


async def create_city(session: AsyncSession, data: CityIn) -> City:
    city = City(name=data.name)
    session.add(city)
    await commit_or_conflict(session, "City")
    return city


async def list_cities(session: AsyncSession) -> list[City]:
    result = await session.execute(select(City).order_by(City.id))
    return list(result.scalars().all())


async def get_city(session: AsyncSession, city_id: int) -> City:
    return await get_or_404(session, City, city_id, "City")


async def update_city(session: AsyncSession, city_id: int, data: CityIn) -> City:
    city = await get_or_404(session, City, city_id, "City")
    apply_changes(city, data.model_dump())
    await commit_or_conflict(session, "City")
    return city


async def delete_city(session: AsyncSession, city_id: int) -> City:
    """Delete a city; refused with a 409 while airports still reference it."""
    city = await get_or_404(session, City, city_id, "City")
    await session.delete(city)
    await commit_or_conflict(session, "City")
    return city
