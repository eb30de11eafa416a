from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query, status

from airline.api.v1.routes.deps import SessionDep
from airline.models.schemas import FlightDetailOut, FlightIn, FlightOut, SeatsUpdate, SuccessResponse
from airline.services import flight_service
from airline.utils.flight_filters import parse_filters

router = APIRouter()


@router.post("", response_model=SuccessResponse[FlightOut], status_code=status.HTTP_201_CREATED)
async def create_flight(session: SessionDep, body: FlightIn) -> SuccessResponse[FlightOut]:
    flight = await flight_service.create_flight(session, body)
    return SuccessResponse(message="Successfully created a flight", data=FlightOut.model_validate(flight))


"""
Flight search.-----------------------------------------------------------------------------------

GET /api/v1/flights
  ?trips=DEL-BOM
  &price=1000-5000
  &travellers=2
  &tripDate=2026-06-01
  &sort=departureTime_ASC,price_DESC
"""
@router.get("", response_model=SuccessResponse[list[FlightDetailOut]])
async def search_flights(
    session: SessionDep,
    trips: Annotated[str | None, Query(description="DEPARTURE-ARRIVAL airport codes")] = None,
    price: Annotated[str | None, Query(description="MIN-MAX price range, or MIN")] = None,
    travellers: Annotated[int | None, Query(ge=1, description="Seats needed")] = None,
    trip_date: Annotated[date | None, Query(alias="tripDate", description="Departure day (YYYY-MM-DD)")] = None,
    sort: Annotated[str | None, Query(description="e.g. departureTime_ASC,price_DESC")] = None,
) -> SuccessResponse[list[FlightDetailOut]]:
    filters = parse_filters(trips=trips, price=price, travellers=travellers, trip_date=trip_date, sort=sort)
    flights = await flight_service.search_flights(session, filters)
    return SuccessResponse(
        message="Successfully fetched flights",
        data=[FlightDetailOut.model_validate(f) for f in flights],
    )


@router.get("/{flight_id}", response_model=SuccessResponse[FlightDetailOut])
async def get_flight(session: SessionDep, flight_id: int) -> SuccessResponse[FlightDetailOut]:
    flight = await flight_service.get_flight(session, flight_id)
    return SuccessResponse(message="Successfully fetched the flight", data=FlightDetailOut.model_validate(flight))


@router.patch("/{flight_id}/seats", response_model=SuccessResponse[FlightOut])
async def update_seats(session: SessionDep, flight_id: int, body: SeatsUpdate) -> SuccessResponse[FlightOut]:
    """Book (dec=true, default) or release seats."""
    flight = await flight_service.update_remaining_seats(session, flight_id, body.seats, dec=body.dec)
    return SuccessResponse(message="Successfully updated remaining seats", data=FlightOut.model_validate(flight))
