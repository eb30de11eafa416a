"""
Parsing of the flight search query string.

    GET /api/v1/flights?trips=DEL-BOM&price=1000-5000&travellers=2
                       &tripDate=2026-06-01&sort=departureTime_ASC,price_DESC

Pure functions (no I/O): the service turns a ``FlightFilters`` into a
SQLAlchemy query, the cache uses ``as_cache_params`` for its key.
"""
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timedelta

from airline.exceptions import BadRequestError

# Upper bound used when the price filter has a single value ("price=2000")
DEFAULT_MAX_PRICE = 20000

SORTABLE_FIELDS = ("price", "departureTime", "arrivalTime", "flightNumber")
SORT_DIRECTIONS = ("ASC", "DESC")


@dataclass
class FlightFilters:
    departure_airport: str | None = None
    arrival_airport: str | None = None
    min_price: int | None = None
    max_price: int | None = None
    min_seats: int | None = None
    departure_from: datetime | None = None
    departure_before: datetime | None = None
    sort: list[tuple[str, str]] = field(default_factory=list)

    def as_cache_params(self) -> dict:
        params = asdict(self)
        for key in ("departure_from", "departure_before"):
            if params[key] is not None:
                params[key] = params[key].isoformat()
        params["sort"] = [list(item) for item in self.sort]
        return params


def parse_trips(trips: str) -> tuple[str, str]:
    parts = [p.strip().upper() for p in trips.split("-")]
    if len(parts) != 2 or not all(parts):
        raise BadRequestError("Invalid trips filter", f"Expected ORIGIN-DESTINATION, got '{trips}'")
    departure, arrival = parts
    if departure == arrival:
        raise BadRequestError("Invalid trips filter", "Departure and arrival airport must differ")
    return departure, arrival


def parse_price(price: str) -> tuple[int, int]:
    parts = price.split("-")
    if len(parts) > 2:
        raise BadRequestError("Invalid price filter", f"Expected MIN or MIN-MAX, got '{price}'")
    try:
        bounds = [int(p) for p in parts]
    except ValueError:
        raise BadRequestError("Invalid price filter", f"Prices must be integers, got '{price}'")

    min_price = bounds[0]
    max_price = bounds[1] if len(bounds) == 2 else DEFAULT_MAX_PRICE
    if min_price > max_price:
        raise BadRequestError("Invalid price filter", "Minimum price is greater than maximum price")
    return min_price, max_price


def parse_sort(sort: str) -> list[tuple[str, str]]:
    """'departureTime_ASC,price_DESC' -> [('departureTime', 'ASC'), ('price', 'DESC')]"""
    result = []
    for item in sort.split(","):
        name, _, direction = item.strip().partition("_")
        direction = direction.upper()
        if name not in SORTABLE_FIELDS or direction not in SORT_DIRECTIONS:
            raise BadRequestError(
                "Invalid sort parameter",
                f"'{item}' must be one of {', '.join(SORTABLE_FIELDS)} followed by _ASC or _DESC",
            )
        result.append((name, direction))
    return result


def parse_filters(
    trips: str | None = None,
    price: str | None = None,
    travellers: int | None = None,
    trip_date: date | None = None,
    sort: str | None = None,
) -> FlightFilters:
    filters = FlightFilters()

    if trips:
        filters.departure_airport, filters.arrival_airport = parse_trips(trips)
    if price:
        filters.min_price, filters.max_price = parse_price(price)
    if travellers is not None:
        filters.min_seats = travellers
    if trip_date is not None:
        # whole day, upper bound exclusive
        filters.departure_from = datetime.combine(trip_date, datetime.min.time())
        filters.departure_before = filters.departure_from + timedelta(days=1)
    if sort:
        filters.sort = parse_sort(sort)

    return filters
