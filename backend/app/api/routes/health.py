"""Health Probes — liveness and database readiness.

Invariants:
    - Liveness never touches the database; it answers as long as the process serves requests
    - Readiness reports every check by name and is 503 when any of them fails
    - Name and version come from the FastAPI app itself (no second copy to drift)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

import app.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


async def _database_ready() -> bool:
    if database.db_manager is None:
        return False
    return await database.db_manager.health_check()


@router.get("/")
async def liveness(request: Request):
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness():
    checks = {"database": "healthy" if await _database_ready() else "unavailable"}
    if any(state != "healthy" for state in checks.values()):
        logger.warning("Readiness failed", extra={"path": "/api/v1/health/ready"})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
