"""Health check endpoints."""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from studio.config import settings
from studio.database import get_db, ping
from studio.logging_config import get_logger
from studio.schemas.common import error_body

router = APIRouter(prefix="/health", tags=["health"])
logger = get_logger("studio.health")


@router.get("")
def health_check(db=Depends(get_db)):
    """Liveness and database readiness for load balancers and monitoring."""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        ping(db)
    except SQLAlchemyError as e:
        logger.error("Health check: database unavailable: %s", e)
        body = error_body("Database unavailable")
        body.update({"timestamp": timestamp, "environment": settings.environment})
        return JSONResponse(status_code=503, content=body)
    return {
        "success": True,
        "message": "Server is healthy",
        "timestamp": timestamp,
        "environment": settings.environment,
    }
