"""
svckit: Health Check Route
=============================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Reports version, uptime and the current catalog size. The catalog
       service is read from app.state, where create_app() stores it.
"""

import time

from fastapi import APIRouter, Request

from svckit import __version__
from svckit.schemas.common import HealthResponse

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    catalog_service = request.app.state.catalog_service
    return HealthResponse(
        status="healthy",
        version=__version__,
        books=len(catalog_service.list_books()),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
