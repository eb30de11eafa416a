from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from airline.db.database import Base
from airline.models.airplane import Airplane
from airline.models.airport import Airport
from airline.models.mixins import TimestampMixin


class Flight(TimestampMixin, Base):
    __tablename__ = "Flights"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    flight_number: Mapped[str] = mapped_column("flightNumber", String(20), nullable=False)
    airplane_id: Mapped[int] = mapped_column(
        "airplaneId", ForeignKey("Airplanes.id", ondelete="RESTRICT"), nullable=False
    )
    departure_airport_id: Mapped[str] = mapped_column(
        "departureAirportId", ForeignKey("Airports.code", ondelete="CASCADE"), nullable=False
    )
    arrival_airport_id: Mapped[str] = mapped_column(
        "arrivalAirportId", ForeignKey("Airports.code", ondelete="CASCADE"), nullable=False
    )
    departure_time: Mapped[datetime] = mapped_column("departureTime", DateTime, nullable=False)
    arrival_time: Mapped[datetime] = mapped_column("arrivalTime", DateTime, nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    boarding_gate: Mapped[str | None] = mapped_column("boardingGate", String(10), nullable=True)
    # remaining seats, decremented by bookings
    total_seats: Mapped[int] = mapped_column("totalSeats", Integer, nullable=False)

    airplane: Mapped[Airplane] = relationship()
    departure_airport: Mapped[Airport] = relationship(foreign_keys=[departure_airport_id])
    arrival_airport: Mapped[Airport] = relationship(foreign_keys=[arrival_airport_id])

    # search filters always hit the route plus the departure day
    __table_args__ = (
        Index("idx_flights_route_departure", "departureAirportId", "arrivalAirportId", "departureTime"),
    )
