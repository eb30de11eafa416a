"""
Helpers shared by the resource services.

Services take an ``AsyncSession``, commit their own writes and report
failures with ``AirlineError`` subclasses; they never build HTTP responses.
"""
import logging
from typing import TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from airline.db.database import Base
from airline.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


async def get_or_404(session: AsyncSession, model: type[ModelT], entity_id: int, label: str) -> ModelT:
    obj = await session.get(model, entity_id)
    if obj is None:
        raise NotFoundError(f"{label} not found", f"{label} with id {entity_id} does not exist")
    return obj


async def commit_or_conflict(session: AsyncSession, label: str) -> None:
    """Commit, turning constraint violations into a 409."""
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        logger.warning("%s write rejected by the store: %s", label, exc.orig)
        raise ConflictError(f"{label} violates a store constraint", str(exc.orig)) from exc


def apply_changes(obj: Base, changes: dict) -> None:
    for name, value in changes.items():
        setattr(obj, name, value)
