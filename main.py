# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HR Dashboard Service
====================
Backend-for-frontend for the HR/CRM administrative dashboard: employee,
client, production job, request and access log tables, the employee
creation wizard and the role hierarchy rules, all backed by the REST API.

Port: 8090
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hrportal.controllers.client_controller import router as client_router
from hrportal.controllers.employee_controller import router as employee_router
from hrportal.controllers.layout_controller import router as layout_router
from hrportal.controllers.log_controller import router as log_router
from hrportal.controllers.production_controller import router as production_router
from hrportal.controllers.reference_controller import router as reference_router
from hrportal.controllers.request_controller import router as request_router
from hrportal.controllers.system_controller import router as system_router
from hrportal.controllers.wizard_controller import router as wizard_router
from hrportal.core import dependencies
from hrportal.core.config import settings
from hrportal.core.logging import get_logger
from hrportal.middleware import RequestContextMiddleware
from hrportal.services.backend_client import DataAccessError

logger = get_logger(__name__)

# Upstream statuses that mean the same thing to the dashboard
PASS_THROUGH_STATUSES = {400, 404, 409, 422}


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Open the shared backend client on startup and close it on shutdown."""
    dependencies.init_backend()
    logger.info(
        "%s v%s starting, backend=%s",
        settings.SERVICE_NAME, settings.SERVICE_VERSION, settings.BACKEND_API_URL,
    )
    yield
    await dependencies.close_backend()
    logger.info("%s shutting down", settings.SERVICE_NAME)


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="HR Dashboard Service",
    description="Tables, drawers and the employee creation wizard for the HR/CRM dashboard.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestContextMiddleware)


# ── Exception handlers ────────────────────────────────────────────────────
@app.exception_handler(DataAccessError)
async def data_access_exception_handler(request: Request, exc: DataAccessError):
    status = exc.status if exc.status in PASS_THROUGH_STATUSES else 502
    logger.warning(
        "Upstream failure on %s %s: %s (upstream status %s)",
        request.method, request.url.path, exc.message, exc.status,
        extra={"request_id": getattr(request.state, "request_id", None)},
    )
    return JSONResponse(
        status_code=status,
        content={"error": "upstream_error", "detail": exc.message},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "request_id": req_id},
    )


# ── Routers ───────────────────────────────────────────────────────────────
app.include_router(system_router)
app.include_router(employee_router)
app.include_router(reference_router)
app.include_router(client_router)
app.include_router(production_router)
app.include_router(request_router)
app.include_router(log_router)
app.include_router(wizard_router)
app.include_router(layout_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
