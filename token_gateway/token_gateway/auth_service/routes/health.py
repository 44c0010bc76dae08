"""
Health check endpoints for the token gateway
"""
from fastapi import APIRouter, HTTPException, status
from datetime import datetime, timezone

from ..db import check_db_connection
from ..schemas import HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus)
def health_check():
    """
    Basic liveness check.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/ready", response_model=HealthStatus)
def readiness_check():
    """
    Readiness check with database connectivity.

    Raises:
        HTTPException: 503 if the database is unreachable
    """
    db_connected = check_db_connection()
    response = {
        "status": "ready" if db_connected else "not_ready",
        "database": "connected" if db_connected else "disconnected",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if not db_connected:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=response)

    return response
