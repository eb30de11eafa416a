#To aggregate all routes for API v1


from fastapi import APIRouter

from airline.api.v1.routes.airplanes import router as airplanes_router
from airline.api.v1.routes.airports import router as airports_router
from airline.api.v1.routes.cities import router as cities_router
from airline.api.v1.routes.flights import router as flights_router
from airline.api.v1.routes.info import info
from airline.config import settings
from airline.models.schemas import SuccessResponse

# Registered once at import, before the server accepts connections.
api_router = APIRouter(prefix=settings.api_prefix)
api_router.include_router(airplanes_router, prefix="/airplanes", tags=["airplanes"])
api_router.include_router(cities_router, prefix="/cities", tags=["cities"])
api_router.include_router(airports_router, prefix="/airports", tags=["airports"])
api_router.include_router(flights_router, prefix="/flights", tags=["flights"])
api_router.add_api_route("/info", info, methods=["GET"], response_model=SuccessResponse[dict], tags=["info"])
