import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from airline.api.v1.router import api_router
from airline.config import settings
from airline.db.database import create_tables, engine
from airline.db.redis import close_redis, ping_redis
from airline.exceptions import AirlineError
from airline.logging_setup import setup_logging
from airline.models.schemas import ErrorBody, ErrorResponse

setup_logging()
logger = logging.getLogger(__name__)


###############---############
# Tables are created with create_all; schema changes need a migration tool
###############---############
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await create_tables(engine)
    await ping_redis()  # the search cache needs Redis, fail fast
    logger.info("Flights service started (%s)", settings.app_env)

    yield

    # Shutdown
    await close_redis()
    await engine.dispose()


app = FastAPI(
    title="Flights Service API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message: str, code: str, explanation) -> JSONResponse:
    body = ErrorResponse(message=message, error=ErrorBody(code=code, explanation=explanation))
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(AirlineError)
async def airline_error_handler(request: Request, exc: AirlineError) -> JSONResponse:
    logger.warning("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return _error_response(exc.status_code, exc.message, exc.code, exc.explanation)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    explanation = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    return _error_response(400, "Invalid request", "BAD_REQUEST", explanation)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, "Something went wrong", "INTERNAL_ERROR", "Internal server error")


app.include_router(api_router)
