"""Shared test configuration and fixtures.

Uses a transactional rollback strategy per test for full isolation:
- Tables are created once per session from the SQLAlchemy metadata.
- Each test runs inside a transaction that rolls back afterwards.
- By default the database is in-memory SQLite; set TEST_DATABASE_URL to run
  the same suite against PostgreSQL.
"""

import uuid
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

import taqueue.models  # noqa: F401
from taqueue.client import QueueClient
from taqueue.config import settings
from taqueue.database import Base, get_db
from taqueue.main import app


def _make_engine():
    url = settings.test_database_url
    if url.startswith("sqlite"):
        # One shared connection, otherwise every checkout sees an empty database
        return create_async_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(url, echo=False, pool_pre_ping=True)


# ---------------------------------------------------------------------------
# Session-scoped: create / drop all tables once per test session
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def test_engine():
    """Create a session-scoped engine tied to the session event loop."""
    engine = _make_engine()
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def setup_test_db(test_engine):
    """Create all tables at the start of the session and drop them at the end."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# ---------------------------------------------------------------------------
# Per-test: transactional rollback for isolation
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_session(test_engine, setup_test_db) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session wrapped in a transaction that always rolls back."""
    async with test_engine.connect() as connection:
        transaction = await connection.begin()
        session = AsyncSession(bind=connection, expire_on_commit=False)

        try:
            yield session
        finally:
            await session.close()
            # A failed flush has already rolled the outer transaction back
            if transaction.is_active:
                await transaction.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def queue_client(client: AsyncClient) -> AsyncGenerator[QueueClient, None]:
    """A QueueClient talking to the app in-process, sharing the test DB session."""
    async with QueueClient("http://testserver", transport=ASGITransport(app=app)) as qc:
        yield qc


# ---------------------------------------------------------------------------
# Convenience fixtures: page helpers
# ---------------------------------------------------------------------------


def unique_page_name(prefix: str = "Room") -> str:
    return f"{prefix} {uuid.uuid4().hex[:8]}"


@pytest_asyncio.fixture
async def test_page(client: AsyncClient) -> dict:
    """Create and return a test page via the API."""
    response = await client.post("/api/page", json={"name": unique_page_name()})
    assert response.status_code == 201, f"Failed to create test page: {response.text}"
    return response.json()
