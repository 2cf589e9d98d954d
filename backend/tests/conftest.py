"""Root conftest — shared test configuration, async DB and FastAPI test client.

Invariants:
    - Env defaults set BEFORE any user_service import (get_settings is cached)
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency
    - bcrypt rounds lowered to the minimum (4) for speed
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from user_service.db.base import Base  # noqa: E402
import user_service.models  # noqa: E402,F401
import user_service.infrastructure.database as db_module  # noqa: E402
from user_service.infrastructure.database import (  # noqa: E402
    get_db, DatabaseSessionManager,
)
from user_service.main import app  # noqa: E402


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
def ana_payload() -> dict:
    return {
        "username": "ana",
        "email": "ana@x.com",
        "phone": "+551199999999",
        "password": "Secret123",
        "role": "Customer",
    }
