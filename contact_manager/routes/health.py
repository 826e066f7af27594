"""
Contact Manager Backend — Health Check Route
==============================================

What:  Health check endpoint for monitoring and container probes.
How:   Runs `SELECT 1` against the database and reports aggregate status.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable (HTTP 503)

The lightweight /contacts/ping probe (always "Pong") lives with the contact
routes; this endpoint additionally verifies the store.
"""

import logging
import time

from fastapi import APIRouter, Response
from sqlalchemy import text

from contact_manager import __version__
from contact_manager import database
from contact_manager.schemas.contact import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Service start time for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
    description="Returns the health status of the backend service and its database.",
)
async def health_check(response: Response) -> HealthResponse:
    """
    Check the health of the service and the database.

    Returns:
        HealthResponse with database status and uptime; HTTP 503 when the
        database cannot be reached.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        async with database.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
