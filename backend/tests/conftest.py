"""
Pytest configuration and fixtures for the insurance plans service.

Tests run against an in-memory SQLite database (aiosqlite); the API's
`get_db` dependency is overridden to use it.
"""

from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.db.models import Base
from app.main import app


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client bound to the app, sharing the test database."""

    async def _override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def family_plan_columns() -> dict[str, Any]:
    """Plan for adults 18-65 with kids, maternity, dental and optical."""
    return {
        "company_name": "Jubilee Health",
        "plan_name": "Family Plus",
        "inpatient_limit": 500000,
        "outpatient_limit": 20000,
        "age_minimum": 18,
        "age_maximum": 65,
        "allows_kids": True,
        "maternity_included": True,
        "dental_included": True,
        "optical_included": True,
    }


@pytest.fixture
def senior_plan_columns() -> dict[str, Any]:
    """Plan for ages 50-80, no kids, optical only."""
    return {
        "company_name": "Madison Insurance",
        "plan_name": "Senior Care",
        "inpatient_limit": 1000000,
        "outpatient_limit": 50000,
        "age_minimum": 50,
        "age_maximum": 80,
        "allows_kids": False,
        "optical_included": True,
    }


@pytest.fixture
def plan_payload() -> dict[str, Any]:
    """camelCase create payload as a client would send it."""
    return {
        "companyName": "Jubilee Health",
        "planName": "Family Plus",
        "inpatientLimit": 500000,
        "outpatientLimit": 20000,
        "ageMinimum": 18,
        "ageMaximum": 65,
        "additionalCovers": {
            "maternity": {"included": True, "limit": 100000},
            "dental": {"included": True, "limit": 15000},
            "optical": {"included": True, "limit": 15000},
        },
        "hospitalBedPerNight": 6000,
        "coPayment": "10% on outpatient",
    }
