"""API test fixtures — async SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness check sees the test engine
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import staffing.models  # noqa: F401
from staffing.db.base import Base
from staffing.infrastructure.database import get_db, DatabaseSessionManager
import staffing.infrastructure.database as db_module
from staffing.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def create_project(client):
    """POST a project and return the JSON body."""
    async def _create(name="Apollo", start="2022-01-01", end=None, **extra):
        payload = {"name": name, "description": "desc", "startDate": start, **extra}
        if end is not None:
            payload["endDate"] = end
        res = await client.post("/api/v1/projects", json=payload)
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
async def create_employee(client):
    """POST an employee and return the JSON body."""
    async def _create(name="Ada", post="Engineer", **extra):
        res = await client.post(
            "/api/v1/employees", json={"name": name, "post": post, **extra},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _create
