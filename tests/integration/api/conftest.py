"""Shared fixtures for API integration tests."""

import sys
from itertools import combinations
from pathlib import Path
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from route_planner.database import Base, enable_sqlite_foreign_keys, get_db, get_session_factory
from route_planner.main import app
from route_planner.models import Leg, Location, Race

from tests.fixtures.factories import create_leg_pair, create_location, create_race

LOCATION_NAMES = ["Start Plaza", "Art Museum", "Bakery", "City Hall", "Finish Park"]

# Store engine globally but recreate per test session
_test_engine = None
_test_session_factory = None


def get_test_engine():
    """Get or create test engine."""
    global _test_engine
    if _test_engine is None:
        _test_engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            echo=False,
            future=True,
            poolclass=StaticPool,
        )
        enable_sqlite_foreign_keys(_test_engine)
    return _test_engine


def get_test_session_factory():
    """Get or create test session factory."""
    global _test_session_factory
    if _test_session_factory is None:
        _test_session_factory = async_sessionmaker(
            bind=get_test_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )
    return _test_session_factory


@pytest.fixture(scope="function")
async def db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = get_test_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session for tests."""
    session_factory = get_test_session_factory()
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture(scope="function")
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API tests."""
    session_factory = get_test_session_factory()

    # One session per request, as in production
    async def get_test_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = get_test_db
    app.dependency_overrides[get_session_factory] = get_test_session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up overrides
    app.dependency_overrides.pop(get_db, None)
    app.dependency_overrides.pop(get_session_factory, None)


@pytest.fixture
async def test_locations(db_session: AsyncSession) -> list[Location]:
    """Create start, three checkpoints and finish, in id order."""
    locations = []
    for i, name in enumerate(LOCATION_NAMES):
        location = create_location(name=name, street_address=f"{i + 1} Main St")
        db_session.add(location)
        locations.append(location)
    await db_session.commit()
    for location in locations:
        await db_session.refresh(location)
    return locations


@pytest.fixture
async def test_race(db_session: AsyncSession, test_locations: list[Location]) -> Race:
    """Race over the five test locations: two checkpoints, bounds in km."""
    race = create_race(start_id=test_locations[0].id, finish_id=test_locations[-1].id)
    race.locations = list(test_locations)
    db_session.add(race)
    await db_session.commit()
    await db_session.refresh(race)
    return race


@pytest.fixture
async def test_legs(db_session: AsyncSession, test_locations: list[Location]) -> list[Leg]:
    """Connect every pair of test locations with 1000 m legs."""
    legs = []
    for start, finish in combinations(test_locations, 2):
        pair = create_leg_pair(start.id, finish.id, 1000.0)
        db_session.add_all(pair)
        legs.extend(pair)
    await db_session.commit()
    return legs
