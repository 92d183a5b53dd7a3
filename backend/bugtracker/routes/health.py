"""
Bug Tracker Backend — Health Check Route
==========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings the store and reports aggregate status.
Who:   Called by container health checks and load balancers.

Status levels:
    - healthy:   Store reachable (HTTP 200)
    - unhealthy: Store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response, status

from bugtracker import __version__
from bugtracker.schemas.bug import HealthResponse
from bugtracker.store import BugStore, get_bug_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Set once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: BugStore = Depends(get_bug_store),
) -> HealthResponse:
    """
    Check the health of the service and its store.

    The store check is BugStore.ping(): SELECT 1 for SQL, always true in memory.
    """
    if await store.ping():
        store_status, overall = "connected", "healthy"
    else:
        store_status, overall = "disconnected", "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("Health check: store unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        store=store_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
