from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from airline.models.airplane import Airplane
from airline.models.schemas import AirplaneIn, AirplaneUpdate
from airline.services.base import apply_changes, commit_or_conflict, get_or_404


async def create_airplane(session: AsyncSession, data: AirplaneIn) -> Airplane:
    airplane = Airplane(**data.model_dump())
    session.add(airplane)
    await commit_or_conflict(session, "Airplane")
    return airplane


async def list_airplanes(session: AsyncSession) -> list[Airplane]:
    result = await session.execute(select(Airplane).order_by(Airplane.id))
    return list(result.scalars().all())


async def get_airplane(session: AsyncSession, airplane_id: int) -> Airplane:
    return await get_or_404(session, Airplane, airplane_id, "Airplane")


async def update_airplane(session: AsyncSession, airplane_id: int, data: AirplaneUpdate) -> Airplane:
    airplane = await get_or_404(session, Airplane, airplane_id, "Airplane")
    apply_changes(airplane, data.model_dump(exclude_unset=True, exclude_none=True))
    await commit_or_conflict(session, "Airplane")
    return airplane


async def delete_airplane(session: AsyncSession, airplane_id: int) -> Airplane:
    airplane = await get_or_404(session, Airplane, airplane_id, "Airplane")
    await session.delete(airplane)
    await commit_or_conflict(session, "Airplane")
    return airplane
