"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blograce.api.dependencies import get_record_store
from blograce.infrastructure.database import get_session
from blograce.infrastructure.document_store_client import (
    DocumentStoreClient,
    get_document_store,
)
from blograce.infrastructure.models import Base
from blograce.main import app
from blograce.services.record_store import RecordStore

# Test database URL (use SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Create test session factory."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def document_store() -> MagicMock:
    """Document store client whose calls all succeed."""
    store = MagicMock(spec=DocumentStoreClient)
    store.save_content = AsyncMock(return_value=None)
    store.delete_content = AsyncMock(return_value=None)
    return store


@pytest.fixture
def record_store(test_session_factory, document_store) -> RecordStore:
    """Record store backed by the in-memory database."""
    return RecordStore(test_session_factory, document_store)


@pytest.fixture
async def client(
    test_session_factory, document_store, record_store
) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client wired to the in-memory database."""

    async def _get_session() -> AsyncGenerator[AsyncSession, None]:
        async with test_session_factory() as session:
            yield session
            await session.commit()

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_document_store] = lambda: document_store
    app.dependency_overrides[get_record_store] = lambda: record_store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
