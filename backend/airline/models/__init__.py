# Importing every model here registers it with Base:
# SQLAlchemy must know all tables before create_all() can run.
from airline.models.airplane import Airplane  # noqa: F401
from airline.models.city import City  # noqa: F401
from airline.models.airport import Airport  # noqa: F401
from airline.models.flight import Flight  # noqa: F401
