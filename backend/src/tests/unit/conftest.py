"""
Shared pytest fixtures and path setup for unit tests.
"""

import os
import sys
from pathlib import Path

# Set required environment variables BEFORE any commerce imports to prevent
# Pydantic Settings validation errors. These are test-only defaults.
os.environ.setdefault("COMMERCE_DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("COMMERCE_ENVIRONMENT", "development")

# Add backend/src to sys.path so commerce.* imports work when running pytest from repo root.
PROJECT_SRC = Path(__file__).resolve().parents[2]
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

from typing import AsyncGenerator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from commerce import models  # noqa: F401
from commerce.core.database import Base
from commerce.models.store import Store

# In-memory SQLite shared through a single connection so every session sees the same tables
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def mock_settings():
    """Provide a mock Settings object for tests that need custom configuration."""
    mock = MagicMock()
    mock.database_url = TEST_DATABASE_URL
    mock.debug = False
    mock.environment = "development"
    mock.log_level = "DEBUG"
    mock.log_format = "text"
    mock.log_file = None
    mock.version = "0.0.0-test"
    return mock


@pytest_asyncio.fixture
async def db_engine():
    """Create a test database engine with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_maker = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def store(db_session: AsyncSession) -> Store:
    """A persisted store to attach settings to."""
    store = Store(
        name="Test Store",
        slug="test-store",
        default_currency="USD",
        default_locale="en",
        timezone="UTC",
        is_active=True,
        config={},
        meta={},
    )
    db_session.add(store)
    await db_session.commit()
    await db_session.refresh(store)
    return store
