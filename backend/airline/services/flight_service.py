"""
Flights: creation with business checks, filtered search and seat updates.

Search results go through the Redis search cache (see ``search_cache``);
every write bumps the cache generation.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from airline.exceptions import BadRequestError, NotFoundError
from airline.models.airplane import Airplane
from airline.models.airport import Airport
from airline.models.flight import Flight
from airline.models.schemas import FlightDetailOut, FlightIn
from airline.services import search_cache
from airline.services.base import commit_or_conflict, get_or_404
from airline.utils.flight_filters import FlightFilters

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "price": Flight.price,
    "departureTime": Flight.departure_time,
    "arrivalTime": Flight.arrival_time,
    "flightNumber": Flight.flight_number,
}

_DETAIL_OPTIONS = (
    selectinload(Flight.airplane),
    selectinload(Flight.departure_airport),
    selectinload(Flight.arrival_airport),
)


async def _airport_by_code(session: AsyncSession, code: str) -> Airport:
    result = await session.execute(select(Airport).where(Airport.code == code))
    airport = result.scalar_one_or_none()
    if airport is None:
        raise NotFoundError("Airport not found", f"Airport with code {code} does not exist")
    return airport


async def create_flight(session: AsyncSession, data: FlightIn) -> Flight:
    if data.arrival_time <= data.departure_time:
        raise BadRequestError("Invalid flight schedule", "Arrival time must be after departure time")
    if data.departure_airport_id == data.arrival_airport_id:
        raise BadRequestError("Invalid flight route", "Departure and arrival airport must differ")

    airplane = await get_or_404(session, Airplane, data.airplane_id, "Airplane")
    await _airport_by_code(session, data.departure_airport_id)
    await _airport_by_code(session, data.arrival_airport_id)

    if data.total_seats > airplane.capacity:
        raise BadRequestError(
            "Invalid seat count",
            f"Total seats {data.total_seats} exceed airplane capacity {airplane.capacity}",
        )

    flight = Flight(**data.model_dump())
    session.add(flight)
    await commit_or_conflict(session, "Flight")
    await search_cache.invalidate_searches()

    logger.info(
        "Flight %s created: %s -> %s at %s",
        flight.flight_number, flight.departure_airport_id, flight.arrival_airport_id, flight.departure_time,
    )
    return flight


def build_search_query(filters: FlightFilters):
    stmt = select(Flight).options(*_DETAIL_OPTIONS)

    if filters.departure_airport:
        stmt = stmt.where(Flight.departure_airport_id == filters.departure_airport)
    if filters.arrival_airport:
        stmt = stmt.where(Flight.arrival_airport_id == filters.arrival_airport)
    if filters.min_price is not None:
        stmt = stmt.where(Flight.price >= filters.min_price)
    if filters.max_price is not None:
        stmt = stmt.where(Flight.price <= filters.max_price)
    if filters.min_seats is not None:
        stmt = stmt.where(Flight.total_seats >= filters.min_seats)
    if filters.departure_from is not None:
        stmt = stmt.where(Flight.departure_time >= filters.departure_from)
    if filters.departure_before is not None:
        stmt = stmt.where(Flight.departure_time < filters.departure_before)

    order_by = []
    for name, direction in filters.sort:
        column = SORT_COLUMNS[name]
        order_by.append(column.desc() if direction == "DESC" else column.asc())
    # stable order for equal sort keys
    order_by.append(Flight.id)
    return stmt.order_by(*order_by)


async def search_flights(session: AsyncSession, filters: FlightFilters) -> list[dict]:
    """
    Returns:
        flights matching every filter, serialized as FlightDetailOut JSON
        (camelCase), the same form whether served from cache or from the DB.
    """
    params = filters.as_cache_params()
    generation = await search_cache.current_generation()

    cached = await search_cache.get_cached_search(generation, params)
    if cached is not None:
        return cached

    result = await session.execute(build_search_query(filters))
    flights = [
        FlightDetailOut.model_validate(f).model_dump(mode="json", by_alias=True)
        for f in result.scalars().all()
    ]

    await search_cache.save_search(generation, params, flights)
    return flights


async def get_flight(session: AsyncSession, flight_id: int) -> Flight:
    result = await session.execute(
        select(Flight).where(Flight.id == flight_id).options(*_DETAIL_OPTIONS)
    )
    flight = result.scalar_one_or_none()
    if flight is None:
        raise NotFoundError("Flight not found", f"Flight with id {flight_id} does not exist")
    return flight


async def update_remaining_seats(
    session: AsyncSession,
    flight_id: int,
    seats: int,
    dec: bool = True,
) -> Flight:
    """
    Book (dec=True) or release seats on a flight.

    The flight row is locked (SELECT ... FOR UPDATE) until commit, so two
    concurrent bookings cannot both read the same remaining count.
    """
    result = await session.execute(
        select(Flight).where(Flight.id == flight_id).with_for_update()
    )
    flight = result.scalar_one_or_none()
    if flight is None:
        await session.rollback()
        raise NotFoundError("Flight not found", f"Flight with id {flight_id} does not exist")

    available = flight.total_seats
    if dec and seats > available:
        await session.rollback()
        raise BadRequestError(
            "Not enough seats",
            f"Requested {seats} seats but only {available} are available",
        )

    flight.total_seats = flight.total_seats - seats if dec else flight.total_seats + seats
    await session.commit()
    await search_cache.invalidate_searches()

    logger.info(
        "Flight %d: %d seats %s, %d remaining",
        flight_id, seats, "booked" if dec else "released", flight.total_seats,
    )
    return flight
