"""
ConfTrack Backend: Health Check Route
=====================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs SELECT 1 against the database, bounded by DB_OPERATION_TIMEOUT,
       and reports uptime.

    Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable or too slow (still HTTP 200; the body
                 carries state)
"""

import asyncio
import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from conftrack import __version__
from conftrack.config import settings
from conftrack.database import engine
from conftrack.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


async def ping_database() -> None:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    """Probe the database and return aggregate status with uptime."""
    db_status = "connected"
    overall = "healthy"

    try:
        await asyncio.wait_for(ping_database(), timeout=settings.db_operation_timeout)
    except asyncio.TimeoutError:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning(
            "Health check: database did not answer within %.1fs",
            settings.db_operation_timeout,
        )
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
