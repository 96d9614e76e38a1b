"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Tests never reach a real Postgres: DATABASE_URL points at SQLite
    - Every test gets a fresh in-memory SQLite database with both tables

Design Decisions:
    - StaticPool: every session shares the one in-memory connection, so rows
      committed by a request are visible to the test and to background tasks
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_CREATE_SCHEMA", "false")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from jadwal.db.base import Base  # noqa: E402
from jadwal.models.schedule import Schedule  # noqa: E402
from jadwal.models.user import User  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_user(test_db):
    """Insert a checked-in user directly into the test DB."""
    user = User(email="owner@mail.com")
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def other_user(test_db):
    user = User(email="intruder@mail.com")
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def seed_schedule(test_db, seed_user):
    """A Monday schedule owned by seed_user."""
    schedule = Schedule(user_id=seed_user.id, title="Math", day="monday")
    test_db.add(schedule)
    await test_db.commit()
    await test_db.refresh(schedule)
    return schedule
