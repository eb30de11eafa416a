from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from airline.db.database import Base
from airline.models.mixins import TimestampMixin


class City(TimestampMixin, Base):
    __tablename__ = "Cities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
