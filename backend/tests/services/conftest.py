"""Service test fixtures - async DB, FastAPI test client, identity headers, fake store.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session, opened through
      DatabaseSessionManager.session() exactly like production
    - db_manager patched so the readiness probe sees the test engine
    - Identity travels as the same trusted headers the gateway sets in production

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session
      sees the tables created by the fixture
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from resource_catalog.db.base import Base
from resource_catalog.infrastructure.database import get_db, DatabaseSessionManager
import resource_catalog.infrastructure.database as db_module
import resource_catalog.models  # noqa: F401
from resource_catalog.main import app

from tests.services.fake_store import FakeRecordStore

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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def seed(test_db):
    """Insert ORM records directly, bypassing the API."""
    async def _seed(*records):
        test_db.add_all(records)
        await test_db.commit()
        for record in records:
            await test_db.refresh(record)
        return records
    return _seed


@pytest.fixture
def fake_store_factory():
    def _make(descriptor, *records):
        return FakeRecordStore(descriptor.key_attr, records)
    return _make


@pytest.fixture
def user_headers():
    return {"X-Auth-Email": "user@ucsb.edu", "X-Auth-Roles": "ROLE_USER"}


@pytest.fixture
def admin_headers():
    return {"X-Auth-Email": "admin@ucsb.edu", "X-Auth-Roles": "ROLE_USER,ROLE_ADMIN"}
