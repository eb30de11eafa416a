from airline.models.schemas import SuccessResponse


async def info() -> SuccessResponse[dict]:
    """Liveness check, never touches the database."""
    return SuccessResponse(message="API is live", data={})
