"""
Airplane endpoints.

POST   /api/v1/airplanes        create
GET    /api/v1/airplanes        list
GET    /api/v1/airplanes/{id}   detail
PATCH  /api/v1/airplanes/{id}   partial update
DELETE /api/v1/airplanes/{id}   delete
"""
from fastapi import APIRouter, status

from airline.api.v1.routes.deps import SessionDep
from airline.models.schemas import AirplaneIn, AirplaneOut, AirplaneUpdate, SuccessResponse
from airline.services import airplane_service

router = APIRouter()


@router.post("", response_model=SuccessResponse[AirplaneOut], status_code=status.HTTP_201_CREATED)
async def create_airplane(session: SessionDep, body: AirplaneIn) -> SuccessResponse[AirplaneOut]:
    airplane = await airplane_service.create_airplane(session, body)
    return SuccessResponse(message="Successfully created an airplane", data=AirplaneOut.model_validate(airplane))


@router.get("", response_model=SuccessResponse[list[AirplaneOut]])
async def list_airplanes(session: SessionDep) -> SuccessResponse[list[AirplaneOut]]:
    airplanes = await airplane_service.list_airplanes(session)
    return SuccessResponse(
        message="Successfully fetched all airplanes",
        data=[AirplaneOut.model_validate(a) for a in airplanes],
    )


@router.get("/{airplane_id}", response_model=SuccessResponse[AirplaneOut])
async def get_airplane(session: SessionDep, airplane_id: int) -> SuccessResponse[AirplaneOut]:
    airplane = await airplane_service.get_airplane(session, airplane_id)
    return SuccessResponse(message="Successfully fetched the airplane", data=AirplaneOut.model_validate(airplane))


@router.patch("/{airplane_id}", response_model=SuccessResponse[AirplaneOut])
async def update_airplane(session: SessionDep, airplane_id: int, body: AirplaneUpdate) -> SuccessResponse[AirplaneOut]:
    airplane = await airplane_service.update_airplane(session, airplane_id, body)
    return SuccessResponse(message="Successfully updated the airplane", data=AirplaneOut.model_validate(airplane))


@router.delete("/{airplane_id}", response_model=SuccessResponse[AirplaneOut])
async def delete_airplane(session: SessionDep, airplane_id: int) -> SuccessResponse[AirplaneOut]:
    airplane = await airplane_service.delete_airplane(session, airplane_id)
    return SuccessResponse(message="Successfully deleted the airplane", data=AirplaneOut.model_validate(airplane))
