from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from airline.db.database import Base
from airline.models.city import City
from airline.models.mixins import TimestampMixin


class Airport(TimestampMixin, Base):
    __tablename__ = "Airports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # IATA code, upper case; flights reference airports by code
    code: Mapped[str] = mapped_column(String(3), unique=True, nullable=False)
    address: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    city_id: Mapped[int] = mapped_column(
        "cityId", ForeignKey("Cities.id", ondelete="RESTRICT"), nullable=False
    )

    # A city with airports cannot be deleted (ON DELETE RESTRICT).
    city: Mapped[City] = relationship()
