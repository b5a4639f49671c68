"""Shared test fixtures for async database, sessions, seeded data, and HTTP client."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from election_api.core.config import Settings
from election_api.core.database import build_engine, build_session_factory
from election_api.main import create_app
from election_api.models.base import Base
from election_api.services.fixture_service import load_fixtures

OP_ROLLETJES = 'Stembureau "Op Rolletjes"'

SAMPLE_ELECTIONS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Gemeenteraadsverkiezingen 2026",
        "location": "Heemdamseburg",
        "number_of_voters": 2000,
        "election_date": "2026-03-18",
        "nomination_date": "2026-02-02",
    },
    {
        "id": 2,
        "name": "Gemeenteraadsverkiezingen 2026",
        "location": "Juinen",
        "number_of_voters": 1500,
        "election_date": "2026-03-18",
        "nomination_date": "2026-02-02",
    },
]

SAMPLE_POLLING_STATIONS: list[dict[str, Any]] = [
    {
        "id": 1,
        "election_id": 1,
        "name": OP_ROLLETJES,
        "number": 33,
        "polling_station_type": "Mobile",
        "street": "Rijdendeweg",
        "house_number": "1",
        "house_number_addition": "b",
        "postal_code": "1234 YQ",
        "locality": "Den Haag",
    },
    {
        "id": 2,
        "election_id": 1,
        "name": "Testschool",
        "number": 34,
        "number_of_voters": 1000,
        "polling_station_type": "FixedLocation",
        "street": "Teststraat",
        "house_number": "2",
        "postal_code": "1234 QY",
        "locality": "Testdorp",
    },
]


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        environment="test",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
async def async_engine(settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory async SQLite engine with the schema in place."""
    engine = build_engine(settings.database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def async_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create a per-test async session."""
    session_factory = build_session_factory(async_engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded_engine(async_engine: AsyncEngine) -> AsyncEngine:
    """Engine whose store holds election 1 with two polling stations and an empty election 2."""
    async with build_session_factory(async_engine)() as session:
        await load_fixtures(session, elections=SAMPLE_ELECTIONS, polling_stations=SAMPLE_POLLING_STATIONS)
    return async_engine


@pytest.fixture
def app(settings: Settings, seeded_engine: AsyncEngine) -> FastAPI:
    """Application bound to the seeded engine."""
    return create_app(settings, engine=seeded_engine)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
