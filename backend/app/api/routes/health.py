"""Health & Readiness Probes — welcome, liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app import __version__
import app.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

SERVICE_NAME = "Superheroes API"


@router.get("/", status_code=status.HTTP_200_OK)
async def welcome():
    return {
        "message": "Welcome to the Superheroes API!",
        "name": SERVICE_NAME,
        "version": __version__,
        "description": "REST API for managing superheroes, built with FastAPI and SQLAlchemy",
    }


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": SERVICE_NAME,
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe — includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"database": "healthy", "dialect": manager.dialect_name},
    }
