"""Health check endpoints for monitoring."""
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.dependencies import get_db
from catalog_api.main_config import fastapi_config

router = APIRouter(
    prefix="/api",
    tags=["health"],
)


@router.get("/")
async def root():
    """API root endpoint."""
    return {
        "message": fastapi_config.title,
        "version": fastapi_config.version,
        "docs": fastapi_config.docs_url,
    }


@router.get("/health")
async def health_check():
    """Liveness check."""
    return {"status": "healthy"}


@router.get("/health/db")
async def database_health_check(session: AsyncSession = Depends(get_db)):
    """Readiness check: the database answers a trivial query."""
    await session.execute(text("SELECT 1"))
    return {"status": "healthy", "database": "reachable"}
