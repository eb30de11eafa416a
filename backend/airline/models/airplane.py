from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from airline.db.database import Base
from airline.models.mixins import TimestampMixin

MAX_CAPACITY = 1000


class Airplane(TimestampMixin, Base):
    __tablename__ = "Airplanes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    model_number: Mapped[str] = mapped_column("modelNumber", String(255), unique=True, nullable=False)
    # seat count
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint(f"capacity >= 0 AND capacity <= {MAX_CAPACITY}", name="ck_airplanes_capacity"),
    )
