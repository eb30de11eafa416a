"""
Shared fixtures for the flights service test suite.

The store is an in-memory SQLite database (aiosqlite) built fresh for each
test; Redis is replaced with an in-memory fake through unittest.mock, so no
real service is needed to run the tests.
"""
import os
from unittest.mock import AsyncMock, patch

# Must be set before anything imports airline.config
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.pool import StaticPool

from airline.db.database import create_tables, get_session, make_engine
from airline.models.airplane import Airplane
from airline.models.airport import Airport
from airline.models.city import City


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores foreign keys unless asked
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def engine():
    engine = make_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


# ---------------------------------------------------------------------------
# Redis
# ---------------------------------------------------------------------------

class FakeRedis:
    """The handful of redis.asyncio.Redis commands the search cache uses."""

    def __init__(self):
        self.store: dict[str, str] = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = value

    async def incr(self, key):
        value = int(self.store.get(key, 0)) + 1
        self.store[key] = str(value)
        return value


@pytest.fixture
def fake_redis():
    redis = FakeRedis()
    with patch("airline.services.search_cache.get_redis", AsyncMock(return_value=redis)):
        yield redis


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(session_maker, fake_redis):
    """AsyncClient on the app, with get_session bound to the test store."""
    from airline.main import app

    async def _session_override():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = _session_override
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

@pytest.fixture
async def world(session):
    """
    Two cities, three airports and one airplane:
    DEL (New Delhi), BOM (New Delhi), LHR (London); airbus320 with 180 seats.
    """
    delhi = City(name="New Delhi")
    london = City(name="London")
    session.add_all([delhi, london])
    await session.flush()

    session.add_all([
        Airport(name="Indira Gandhi International", code="DEL", city_id=delhi.id),
        Airport(name="Chhatrapati Shivaji", code="BOM", city_id=delhi.id),
        Airport(name="Heathrow", code="LHR", city_id=london.id),
    ])
    airplane = Airplane(model_number="airbus320", capacity=180)
    session.add(airplane)
    await session.commit()

    return {"delhi": delhi, "london": london, "airplane": airplane}

