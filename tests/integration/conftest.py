from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from config import ApplicationConfig
from src.api.app import create_app
from src.depends import InMemoryBackend, SqlBackend, get_clock


@pytest.fixture
def db_uri(tmp_path):
    """File-backed SQLite database, fresh for each test"""
    return f"sqlite+aiosqlite:///{tmp_path / 'marketplace_test.db'}"


@pytest_asyncio.fixture(scope="function")
async def engine(db_uri):
    """Create test database engine with all tables"""
    engine = create_async_engine(db_uri, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest.fixture
def clock():
    """Mutable clock injected into the app in place of utcnow"""
    return SimpleNamespace(now=datetime(2024, 1, 31, 10, 0, 0, tzinfo=timezone.utc))


async def _client_for(backend, clock):
    app = create_app(ApplicationConfig, backend=backend)
    app.dependency_overrides[get_clock] = lambda: clock.now

    # ASGITransport does not run the lifespan
    await backend.init()
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest_asyncio.fixture
async def client(clock):
    """Test client over a fresh in-memory backend"""
    backend = InMemoryBackend(ApplicationConfig)
    async with await _client_for(backend, clock) as ac:
        yield ac


@pytest_asyncio.fixture
async def sql_client(clock, db_uri):
    """Test client over the SQL backend"""
    backend = SqlBackend(ApplicationConfig, db_uri=db_uri)
    async with await _client_for(backend, clock) as ac:
        yield ac
    await backend.dispose()
