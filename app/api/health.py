"""Health and readiness endpoints.

  /api/health (liveness): "is this process alive?"  Always 200; the
    ``checks`` section reports dependency status so a partial outage
    shows up as ``database: degraded`` instead of a restart loop.

  /api/ready (readiness): "can this instance take traffic?"  503 when a
    configured database is unreachable, so the load balancer stops
    routing here until it recovers.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Response
from starlette.concurrency import run_in_threadpool

from app.db.engine import ping_database

router = APIRouter(prefix="/api", tags=["health"])

SERVICE_NAME = "course-service"
SERVICE_VERSION = "1.0.0"


@router.get("/health")
async def health() -> dict:
    database = await run_in_threadpool(ping_database)
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "timestamp": int(time.time() * 1000),
        "checks": {"database": database},
    }


@router.get("/ready")
async def ready() -> Response:
    database = await run_in_threadpool(ping_database)
    if database == "degraded":
        return Response(status_code=503)
    return Response(status_code=200)
