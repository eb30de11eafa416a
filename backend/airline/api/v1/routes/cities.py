from fastapi import APIRouter, status

from airline.api.v1.routes.deps import SessionDep
from airline.models.schemas import CityIn, CityOut, SuccessResponse
from airline.services import city_service

router = APIRouter()


@router.post("", response_model=SuccessResponse[CityOut], status_code=status.HTTP_201_CREATED)
async def create_city(session: SessionDep, body: CityIn) -> SuccessResponse[CityOut]:
    city = await city_service.create_city(session, body)
    return SuccessResponse(message="Successfully created a city", data=CityOut.model_validate(city))


@router.get("", response_model=SuccessResponse[list[CityOut]])
async def list_cities(session: SessionDep) -> SuccessResponse[list[CityOut]]:
    cities = await city_service.list_cities(session)
    return SuccessResponse(message="Successfully fetched all cities", data=[CityOut.model_validate(c) for c in cities])


@router.get("/{city_id}", response_model=SuccessResponse[CityOut])
async def get_city(session: SessionDep, city_id: int) -> SuccessResponse[CityOut]:
    city = await city_service.get_city(session, city_id)
    return SuccessResponse(message="Successfully fetched the city", data=CityOut.model_validate(city))


@router.patch("/{city_id}", response_model=SuccessResponse[CityOut])
async def update_city(session: SessionDep, city_id: int, body: CityIn) -> SuccessResponse[CityOut]:
    city = await city_service.update_city(session, city_id, body)
    return SuccessResponse(message="Successfully updated the city", data=CityOut.model_validate(city))


@router.delete("/{city_id}", response_model=SuccessResponse[CityOut])
async def delete_city(session: SessionDep, city_id: int) -> SuccessResponse[CityOut]:
    """Deleting a city also deletes its airports."""
    city = await city_service.delete_city(session, city_id)
    return SuccessResponse(message="Successfully deleted the city", data=CityOut.model_validate(city))
