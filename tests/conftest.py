from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401  registers every table on Base.metadata
from app.core.database import get_async_session
from app.models.auth.employee import Employee
from app.models.base import Base
from main import app

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine():
    """Fresh in-memory database per test"""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


async def _create_employee(session_maker, **fields) -> Employee:
    async with session_maker() as session:
        employee = Employee(**fields)
        session.add(employee)
        await session.commit()
        await session.refresh(employee)
        return employee


@pytest.fixture
async def admin(session_maker) -> Employee:
    return await _create_employee(
        session_maker,
        name="Admin User",
        email="admin@store.test",
        job_title="Manager",
        gender="MALE",
        permissions=["ALL"],
    )


@pytest.fixture
async def viewer(session_maker) -> Employee:
    return await _create_employee(
        session_maker,
        name="Catalog Viewer",
        email="viewer@store.test",
        job_title="Assistant",
        gender="FEMALE",
        permissions=["categories.view"],
    )


@pytest.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the per-test database"""
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
