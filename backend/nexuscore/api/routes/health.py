"""Health & Readiness Probes: liveness line at "/" and a readiness check.

Invariants:
    - GET / always returns 200 text if the process is up (liveness)
    - GET /api/health/ready returns 503 if the database does not answer a ping
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from nexuscore.infrastructure.database import MongoManager, get_mongo

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def liveness(mongo: MongoManager | None = Depends(get_mongo)):
    """Basic liveness probe with the last known database state."""
    connected = bool(mongo and mongo.connected)
    state = "Connected" if connected else "Disconnected"
    return f"Server is running... MongoDB connection status: {state}"


@router.get("/api/health/ready")
async def readiness_check(mongo: MongoManager | None = Depends(get_mongo)):
    """Readiness probe: includes database connectivity."""
    db_ok = await mongo.health_check() if mongo else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
