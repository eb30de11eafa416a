from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from airline.models.airport import Airport
from airline.models.city import City
from airline.models.schemas import AirportIn, AirportUpdate
from airline.services.base import apply_changes, commit_or_conflict, get_or_404


async def create_airport(session: AsyncSession, data: AirportIn) -> Airport:
    await get_or_404(session, City, data.city_id, "City")
    airport = Airport(**data.model_dump())
    session.add(airport)
    await commit_or_conflict(session, "Airport")
    return airport


async def list_airports(session: AsyncSession) -> list[Airport]:
    result = await session.execute(select(Airport).order_by(Airport.code))
    return list(result.scalars().all())


async def get_airport(session: AsyncSession, airport_id: int) -> Airport:
    return await get_or_404(session, Airport, airport_id, "Airport")


async def update_airport(session: AsyncSession, airport_id: int, data: AirportUpdate) -> Airport:
    airport = await get_or_404(session, Airport, airport_id, "Airport")
    changes = data.model_dump(exclude_unset=True)
    if "city_id" in changes:
        await get_or_404(session, City, changes["city_id"], "City")
    apply_changes(airport, changes)
    await commit_or_conflict(session, "Airport")
    return airport


async def delete_airport(session: AsyncSession, airport_id: int) -> Airport:
    airport = await get_or_404(session, Airport, airport_id, "Airport")
    await session.delete(airport)
    await session.commit()
    return airport
