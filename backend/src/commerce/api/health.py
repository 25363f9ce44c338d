"""Health check endpoint."""

from fastapi import APIRouter

from ..core.config import get_settings_instance
from ..core.database import check_db_connection
from ..core.response import CommerceResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health():
    settings = get_settings_instance()
    database_ok = await check_db_connection()
    return CommerceResponse.success(
        {
            "status": "healthy" if database_ok else "degraded",
            "version": settings.version,
            "database": "connected" if database_ok else "unavailable",
        },
        status_code=200 if database_ok else 503,
    )
