"""
Database connection and session management for the commerce backend.

This module provides the declarative base, lazy async engine/session
factories and the request-scoped session dependency.
"""

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from .config import get_settings_instance
from .exceptions import DatabaseConnectionError, DatabaseInitializationError, DatabaseSessionError
from .logging import get_logger

logger = get_logger(__name__)

# Create declarative base
Base = declarative_base()

# Global async engine and session factory - lazy initialization
_async_engine = None
_AsyncSessionLocal = None


def _safe_url(database_url: str) -> str:
    """Strip credentials from a database URL for logging."""
    return database_url.split("@", 1)[1] if "@" in database_url else database_url


def get_async_engine():
    global _async_engine  # noqa: PLW0603
    if _async_engine is None:
        settings = get_settings_instance()
        database_url = settings.database_url
        logger.debug(f"Database configuration: {_safe_url(database_url)}")

        engine_kwargs = {"pool_pre_ping": True, "echo": False}
        # SQLite (tests, local tooling) uses a single-connection pool without sizing options
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
                pool_timeout=settings.database_pool_timeout,
                pool_recycle=settings.database_pool_recycle,
            )
        try:
            _async_engine = create_async_engine(database_url, **engine_kwargs)
        except Exception as e:
            logger.error(f"Failed to create async database engine: {str(e)}")
            raise DatabaseConnectionError(f"engine creation: {str(e)}")
    return _async_engine


def get_async_session_local():
    global _AsyncSessionLocal  # noqa: PLW0603
    if _AsyncSessionLocal is None:
        _AsyncSessionLocal = async_sessionmaker(
            bind=get_async_engine(),
            expire_on_commit=False,
            autoflush=False,
            class_=AsyncSession,
        )
    return _AsyncSessionLocal


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    session_local = get_async_session_local()
    async with session_local() as session:
        try:
            yield session
        except SQLAlchemyError as e:
            logger.error(f"Database session error: {str(e)}")
            await session.rollback()
            raise DatabaseSessionError(f"session operation: {str(e)}")


async def init_db() -> None:
    """Create all tables known to the declarative base."""
    # Import models so Base.metadata has all tables
    from .. import models  # noqa: F401

    try:
        engine = get_async_engine()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables initialized successfully")
    except SQLAlchemyError as e:
        logger.error(f"Database initialization failed: {str(e)}")
        raise DatabaseInitializationError(str(e))


async def close_db() -> None:
    global _async_engine, _AsyncSessionLocal  # noqa: PLW0603
    if _async_engine is None:
        return
    await _async_engine.dispose()
    _async_engine = None
    _AsyncSessionLocal = None
    logger.debug("Database connections closed")


async def check_db_connection() -> bool:
    """Check if database connection is working."""
    try:
        engine = get_async_engine()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {str(e)}")
        return False
