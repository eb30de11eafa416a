"""
Airport endpoints.

Airports belong to a city (``cityId``) and are referenced by flights
through their IATA ``code``.
"""
from fastapi import APIRouter, status

from airline.api.v1.routes.deps import SessionDep
from airline.models.schemas import AirportIn, AirportOut, AirportUpdate, SuccessResponse
from airline.services import airport_service

router = APIRouter()


@router.post("", response_model=SuccessResponse[AirportOut], status_code=status.HTTP_201_CREATED)
async def create_airport(session: SessionDep, body: AirportIn) -> SuccessResponse[AirportOut]:
    airport = await airport_service.create_airport(session, body)
    return SuccessResponse(message="Successfully created an airport", data=AirportOut.model_validate(airport))


@router.get("", response_model=SuccessResponse[list[AirportOut]])
async def list_airports(session: SessionDep) -> SuccessResponse[list[AirportOut]]:
    """To get all airports, ordered by code"""
    airports = await airport_service.list_airports(session)
    return SuccessResponse(
        message="Successfully fetched all airports",
        data=[AirportOut.model_validate(a) for a in airports],
    )


@router.get("/{airport_id}", response_model=SuccessResponse[AirportOut])
async def get_airport(session: SessionDep, airport_id: int) -> SuccessResponse[AirportOut]:
    airport = await airport_service.get_airport(session, airport_id)
    return SuccessResponse(message="Successfully fetched the airport", data=AirportOut.model_validate(airport))


@router.patch("/{airport_id}", response_model=SuccessResponse[AirportOut])
async def update_airport(session: SessionDep, airport_id: int, body: AirportUpdate) -> SuccessResponse[AirportOut]:
    airport = await airport_service.update_airport(session, airport_id, body)
    return SuccessResponse(message="Successfully updated the airport", data=AirportOut.model_validate(airport))


@router.delete("/{airport_id}", response_model=SuccessResponse[AirportOut])
async def delete_airport(session: SessionDep, airport_id: int) -> SuccessResponse[AirportOut]:
    airport = await airport_service.delete_airport(session, airport_id)
    return SuccessResponse(message="Successfully deleted the airport", data=AirportOut.model_validate(airport))
