"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the content backend is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      load balancer (ADR: production readiness)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from wp_frontend.config import Settings, get_settings
from wp_frontend.infrastructure.wordpress_client import WordPressClient, get_wp_client

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "wp-frontend",
        "api_mode": settings.api_mode.value,
    }


@router.get("/ready")
async def readiness_check(client: WordPressClient = Depends(get_wp_client)):
    """Readiness probe — includes content backend connectivity."""
    if not await client.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "upstream_unavailable",
            },
        )
    return {"status": "ready", "checks": {"upstream": "healthy"}}
