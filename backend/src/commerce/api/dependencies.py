"""
FastAPI dependencies for the commerce API.

Provides the request-scoped database session, service construction and
store lookup shared by the routers.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db as core_get_db
from ..core.exceptions import StoreNotFoundError
from ..models.store import Store
from ..services.settings_service import SettingsService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Database session dependency."""
    async for session in core_get_db():
        yield session


async def get_settings_service(db: AsyncSession = Depends(get_db)) -> SettingsService:
    return SettingsService(db)


async def require_store(store_id: str, db: AsyncSession = Depends(get_db)) -> Store:
    """Resolve the ``store_id`` path parameter or fail with 404."""
    store = await db.get(Store, store_id)
    if store is None:
        raise StoreNotFoundError(store_id)
    return store
