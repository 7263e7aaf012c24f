"""
Health check router with database and session backend verification.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session
import redis

from menuhub.core.config import get_settings
from menuhub.db.session import get_db
from menuhub.services.sessions import get_redis_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Basic health check - always returns OK."""
    return {"status": "ok"}


@router.get("/api/health")
def api_health_check(db: Session = Depends(get_db)):
    """
    Health check verifying:
    - Database connectivity
    - Redis connectivity, when sessions are stored in Redis

    Returns 200 if all critical services are healthy.
    Returns 503 if any critical service is down.
    """
    health_status = {
        "status": "ok",
        "services": {}
    }
    is_healthy = True

    try:
        db.execute(text("SELECT 1"))
        health_status["services"]["database"] = {"status": "ok"}
    except Exception:
        logger.error("Database health check failed", exc_info=True)
        health_status["services"]["database"] = {"status": "error", "message": "Database unavailable"}
        is_healthy = False

    # Redis only matters when it holds the sessions
    if get_settings().SESSION_BACKEND == "redis":
        try:
            get_redis_client().ping()
            health_status["services"]["redis"] = {"status": "ok"}
        except redis.RedisError:
            logger.error("Redis health check failed", exc_info=True)
            health_status["services"]["redis"] = {"status": "error", "message": "Redis unavailable"}
            is_healthy = False

    if not is_healthy:
        health_status["status"] = "unhealthy"
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=health_status
        )

    return health_status
