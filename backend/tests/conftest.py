"""
BeerBarBrewery Backend - Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the whole suite.
How:   pytest auto-discovers this file; fixtures are function-scoped so every
       test starts from an empty database and fresh mocks.

Fixture Hierarchy:
    ├── db_engine:        in-memory SQLite engine (aiosqlite) with all tables
    ├── db_session:       AsyncSession on that engine (repository tests)
    ├── test_client:      httpx AsyncClient on the app, sessions from db_engine
    ├── beer_repository / bar_repository / brewery_repository:
    │                     MagicMock(spec=...) repositories (service tests)
    └── make_beer / make_bar / make_brewery:
                          factories for transient ORM entities
"""

import os

# Settings are read at import time, so the environment must be prepared
# before anything under `app` is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AUTO_CREATE_SCHEMA"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from decimal import Decimal  # noqa: E402
from typing import AsyncGenerator  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import app.models  # noqa: E402,F401
from app.database import Base, enable_sqlite_foreign_keys, get_db_session  # noqa: E402
from app.models import Bar, BarBeer, Beer, Brewery  # noqa: E402
from app.repositories import BarRepository, BeerRepository, BreweryRepository  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite database with the full schema.

    StaticPool keeps a single connection, so every session in the test sees
    the same in-memory database. Foreign keys are enforced so ON DELETE
    CASCADE / SET NULL behave as on PostgreSQL.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTP client for endpoint tests.

    get_db_session is overridden with one that behaves the same way
    (commit on success, rollback on error) against the test engine.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


# ══════════════════════════════════════════════════════════════════════════
# Mock Repositories (service unit tests)
# ══════════════════════════════════════════════════════════════════════════
# spec= makes every async repository method an AsyncMock.

@pytest.fixture
def beer_repository():
    return MagicMock(spec=BeerRepository)


@pytest.fixture
def bar_repository():
    return MagicMock(spec=BarRepository)


@pytest.fixture
def brewery_repository():
    return MagicMock(spec=BreweryRepository)


# ══════════════════════════════════════════════════════════════════════════
# Entity Factories
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def make_beer():
    def _make(id=1, name="Pale Ale", abv="5.20", brewery_id=None) -> Beer:
        return Beer(
            id=id,
            name=name,
            percentage_alcohol_by_volume=Decimal(abv),
            brewery_id=brewery_id,
        )
    return _make


@pytest.fixture
def make_brewery():
    def _make(id=1, name="Hop House", beers=None) -> Brewery:
        return Brewery(id=id, name=name, beers=beers or [])
    return _make


@pytest.fixture
def make_bar():
    def _make(id=1, name="The Crown", address="1 High Street", beers=None) -> Bar:
        bar = Bar(id=id, name=name, address=address)
        for beer in beers or []:
            bar.bar_beers.append(BarBeer(bar_id=id, beer_id=beer.id, beer=beer))
        return bar
    return _make
