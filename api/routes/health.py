"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
from datetime import datetime, timezone
import logging
import platform

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from api.dependencies import get_session_factory
from core.infrastructure.database.config import ping_database
from core.settings import get_app_settings


logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns system health status.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "storefront-orders",
        "version": get_app_settings().api.version,
        "python_version": platform.python_version(),
    }


@router.get("/health/ready")
async def readiness_check(session_factory=Depends(get_session_factory)):
    """
    Readiness check endpoint.

    Returns whether the service can reach its database.
    """
    try:
        await ping_database(session_factory)
        database = "ok"
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Readiness check failed: {e}")
        database = "unavailable"

    ready = database == "ok"
    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": {
                "api": "ok",
                "database": database,
            },
        },
    )
