"""Shared test fixtures."""

import sys
from itertools import combinations
from pathlib import Path
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from route_planner.database import Base, enable_sqlite_foreign_keys
from route_planner.logging_utils import get_logger
from route_planner.models import Leg, Location, Race

from tests.fixtures.factories import create_leg_pair, create_location, create_race
from tests.fixtures.fakes import RecordingHandler

LOCATION_NAMES = ["Start Plaza", "Art Museum", "Bakery", "City Hall", "Finish Park"]


@pytest.fixture
async def db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create async session with transaction rollback."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def test_location(db_session: AsyncSession) -> Location:
    """Create a sample location for testing."""
    location = create_location()
    db_session.add(location)
    await db_session.flush()
    return location


@pytest.fixture
async def test_locations(db_session: AsyncSession) -> list[Location]:
    """Create start, three checkpoints and finish, in id order."""
    locations = []
    for i, name in enumerate(LOCATION_NAMES):
        location = create_location(name=name, street_address=f"{i + 1} Main St")
        db_session.add(location)
        locations.append(location)
    await db_session.flush()
    return locations


@pytest.fixture
async def test_race(db_session: AsyncSession, test_locations: list[Location]) -> Race:
    """Race over the five test locations: two checkpoints, bounds in km."""
    race = create_race(
        start_id=test_locations[0].id,
        finish_id=test_locations[-1].id,
    )
    race.locations = list(test_locations)
    db_session.add(race)
    await db_session.flush()
    return race


@pytest.fixture
async def test_legs(db_session: AsyncSession, test_locations: list[Location]) -> list[Leg]:
    """Connect every pair of test locations with 1000 m legs."""
    legs = []
    for start, finish in combinations(test_locations, 2):
        pair = create_leg_pair(start.id, finish.id, 1000.0)
        db_session.add_all(pair)
        legs.extend(pair)
    await db_session.flush()
    return legs


@pytest.fixture
def log_records():
    """Records written through log_event during the test."""
    handler = RecordingHandler()
    logger = get_logger()
    logger.addHandler(handler)
    yield handler.records
    logger.removeHandler(handler)
