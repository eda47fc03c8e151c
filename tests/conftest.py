from __future__ import annotations

import os

# Must be set before the application modules read their configuration
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["API_TOKEN"] = ""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from starlette.testclient import TestClient

from employee_directory.client.api import EmployeeAPI
from employee_directory.core.database import Base, get_db
from employee_directory.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def employee_payload():
    return {
        "name": "Jane Doe",
        "email": "jane.doe@acme.io",
        "position": "Engineer",
        "phone": "5551234567",
        "department": "Platform",
    }


@pytest.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'employees.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def override_db(session_factory):
    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(override_db):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def api(override_db):
    async with EmployeeAPI(base_url="http://test/api", transport=ASGITransport(app=app)) as client:
        yield client


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
