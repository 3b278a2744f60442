# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints (health, readiness, metrics).
Pure HTTP layer, no business logic.
"""

from datetime import datetime, timezone

import httpx
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from hrportal.core.config import settings
from hrportal.core.dependencies import get_backend_client, get_cache, get_wizard_repo

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    """Liveness probe for Docker and orchestration."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "cached_queries": len(get_cache()),
        "open_wizards": get_wizard_repo().count(),
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe: the REST backend must answer its health path."""
    backend = get_backend_client()
    try:
        status = await backend.ping(settings.BACKEND_HEALTH_PATH)
    except httpx.RequestError as exc:
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "service": settings.SERVICE_NAME,
                     "backend": "down", "detail": str(exc)},
        )
    ready = status < 500
    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "unavailable",
            "service": settings.SERVICE_NAME,
            "backend": "up" if ready else "error",
            "backend_status": status,
        },
    )


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
