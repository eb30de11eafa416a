from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from airline.models.airplane import MAX_CAPACITY

T = TypeVar("T")


class CamelModel(BaseModel):
    # JSON is camelCase like the stored columns, python side stays snake_case.
    # from_attributes lets Pydantic read SQLAlchemy objects directly.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# ---------------------------------------------------------------------------
# Response envelope, shared by every endpoint
# ---------------------------------------------------------------------------

class SuccessResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: T
    error: dict = Field(default_factory=dict)


class ErrorBody(BaseModel):
    code: str
    explanation: str | list[str]


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    data: dict = Field(default_factory=dict)
    error: ErrorBody


# ---------------------------------------------------------------------------
# Airplanes
# ---------------------------------------------------------------------------

MODEL_NUMBER_PATTERN = r"^[A-Za-z0-9]+$"


class AirplaneIn(CamelModel):
    model_number: str = Field(min_length=1, max_length=255, pattern=MODEL_NUMBER_PATTERN)
    capacity: int = Field(default=0, ge=0, le=MAX_CAPACITY)


class AirplaneUpdate(CamelModel):
    model_number: str | None = Field(default=None, min_length=1, max_length=255, pattern=MODEL_NUMBER_PATTERN)
    capacity: int | None = Field(default=None, ge=0, le=MAX_CAPACITY)


class AirplaneOut(CamelModel):
    id: int
    model_number: str
    capacity: int
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Cities
# ---------------------------------------------------------------------------

class CityIn(CamelModel):
    name: str = Field(min_length=1, max_length=255)


class CityOut(CamelModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Airports
# ---------------------------------------------------------------------------

AIRPORT_CODE_PATTERN = r"^[A-Za-z]{3}$"


class AirportIn(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    code: str = Field(pattern=AIRPORT_CODE_PATTERN)
    address: str | None = Field(default=None, max_length=255)
    city_id: int

    @field_validator("code")
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.upper()


class AirportUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    code: str | None = Field(default=None, pattern=AIRPORT_CODE_PATTERN)
    address: str | None = Field(default=None, max_length=255)
    city_id: int | None = None

    @field_validator("name", "code", "city_id")
    @classmethod
    def not_null(cls, v):
        # may be omitted, but the columns are NOT NULL
        if v is None:
            raise ValueError("cannot be null")
        return v

    @field_validator("code")
    @classmethod
    def upper_code(cls, v: str | None) -> str | None:
        return v.upper() if v is not None else v


class AirportOut(CamelModel):
    id: int
    name: str
    code: str
    address: str | None
    city_id: int
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Flights
# ---------------------------------------------------------------------------

def _to_naive_utc(v: datetime) -> datetime:
    # stored columns are naive UTC
    if v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


class FlightIn(CamelModel):
    flight_number: str = Field(min_length=1, max_length=20)
    airplane_id: int
    departure_airport_id: str = Field(pattern=AIRPORT_CODE_PATTERN)
    arrival_airport_id: str = Field(pattern=AIRPORT_CODE_PATTERN)
    departure_time: datetime
    arrival_time: datetime
    price: int = Field(ge=0)
    boarding_gate: str | None = Field(default=None, max_length=10)
    total_seats: int = Field(ge=0)

    @field_validator("departure_airport_id", "arrival_airport_id")
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.upper()

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def naive_utc(cls, v: datetime) -> datetime:
        return _to_naive_utc(v)


class FlightOut(CamelModel):
    id: int
    flight_number: str
    airplane_id: int
    departure_airport_id: str
    arrival_airport_id: str
    departure_time: datetime
    arrival_time: datetime
    price: int
    boarding_gate: str | None
    total_seats: int
    created_at: datetime
    updated_at: datetime


class FlightDetailOut(FlightOut):
    """Flight with its airplane and both airports embedded (search/detail views)."""
    airplane: AirplaneOut
    departure_airport: AirportOut
    arrival_airport: AirportOut


class SeatsUpdate(CamelModel):
    seats: int = Field(gt=0)
    # True books seats, False releases them
    dec: bool = True

