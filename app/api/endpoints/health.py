"""
Health check endpoints.

Provides liveness and a detailed status for the database and upload storage.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict
from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.storage import StorageBackend, StorageError, get_storage

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    """
    return {"status": "healthy", "timestamp": _now()}


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
def detailed_health_check(
    db: Session = Depends(get_db),
    storage: StorageBackend = Depends(get_storage)
) -> Dict[str, Any]:
    """
    Detailed health check with dependency status.

    Checks:
    - Database connectivity
    - Upload storage availability
    """
    health_status: Dict[str, Any] = {
        "status": "healthy",
        "timestamp": _now(),
        "checks": {}
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = {"status": "healthy"}
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {"status": "unhealthy", "message": "Database unreachable"}

    try:
        storage.check_health()
        health_status["checks"]["storage"] = {"status": "healthy"}
    except StorageError as e:
        logger.error(f"Storage health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["storage"] = {"status": "unhealthy", "message": "Storage unavailable"}

    return health_status
