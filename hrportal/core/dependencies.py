# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection: shared HTTP client, cache, repositories, services.
"""

import httpx

from hrportal.core.config import settings
from hrportal.repositories.layout_repository import LayoutRepository
from hrportal.repositories.wizard_repository import WizardRepository
from hrportal.services.access_log_api import AccessLogApi
from hrportal.services.backend_client import BackendClient
from hrportal.services.client_api import ClientApi
from hrportal.services.client_service import ClientService
from hrportal.services.employee_service import EmployeeService
from hrportal.services.hr_api import HRApi
from hrportal.services.layout_service import LayoutService
from hrportal.services.log_service import LogService
from hrportal.services.production_service import ProductionService
from hrportal.services.project_api import ProjectApi
from hrportal.services.query_cache import QueryCache
from hrportal.services.reference_service import ReferenceService
from hrportal.services.request_api import RequestApi
from hrportal.services.request_service import RequestService
from hrportal.services.wizard_service import WizardService

# ── Singletons that live as long as the process ──
_cache = QueryCache(default_gc=settings.CACHE_GC_SECONDS)
_wizard_repo = WizardRepository(
    max_sessions=settings.MAX_WIZARD_SESSIONS,
    ttl_seconds=settings.WIZARD_SESSION_TTL_SECONDS,
)
_layout_repo = LayoutRepository()
_layout_service = LayoutService(_layout_repo)

# ── Built around the shared AsyncClient in init_backend() ──
_http_client: httpx.AsyncClient | None = None
_backend: BackendClient | None = None
_reference_service: ReferenceService | None = None
_employee_service: EmployeeService | None = None
_client_service: ClientService | None = None
_production_service: ProductionService | None = None
_request_service: RequestService | None = None
_log_service: LogService | None = None
_wizard_service: WizardService | None = None


def init_backend(transport: httpx.AsyncBaseTransport | None = None) -> None:
    """Create the shared AsyncClient and every service that talks upstream."""
    global _http_client, _backend, _reference_service, _employee_service
    global _client_service, _production_service, _request_service, _log_service
    global _wizard_service

    headers = {"Accept": "application/json"}
    if settings.BACKEND_API_TOKEN:
        headers["Authorization"] = f"Bearer {settings.BACKEND_API_TOKEN}"
    _http_client = httpx.AsyncClient(
        base_url=settings.BACKEND_API_URL,
        timeout=settings.BACKEND_TIMEOUT,
        headers=headers,
        transport=transport,
    )
    _backend = BackendClient(_http_client)

    hr_api = HRApi(_backend)
    _reference_service = ReferenceService(hr_api, _cache)
    _employee_service = EmployeeService(hr_api, _reference_service, _cache)
    _client_service = ClientService(ClientApi(_backend), _cache)
    _production_service = ProductionService(ProjectApi(_backend), _cache)
    _request_service = RequestService(RequestApi(_backend), _cache)
    _log_service = LogService(AccessLogApi(_backend), _cache)
    _wizard_service = WizardService(_wizard_repo, _reference_service, hr_api, _cache)


async def close_backend() -> None:
    global _http_client
    if _http_client:
        await _http_client.aclose()
        _http_client = None


def reset_state() -> None:
    """Forget cached reads, wizard sessions and layouts."""
    _cache.clear()
    _wizard_repo.clear()
    _layout_repo.clear()


# ── FastAPI dependency functions ──
def get_backend_client() -> BackendClient:
    assert _backend is not None
    return _backend


def get_reference_service() -> ReferenceService:
    assert _reference_service is not None
    return _reference_service


def get_employee_service() -> EmployeeService:
    assert _employee_service is not None
    return _employee_service


def get_client_service() -> ClientService:
    assert _client_service is not None
    return _client_service


def get_production_service() -> ProductionService:
    assert _production_service is not None
    return _production_service


def get_request_service() -> RequestService:
    assert _request_service is not None
    return _request_service


def get_log_service() -> LogService:
    assert _log_service is not None
    return _log_service


def get_wizard_service() -> WizardService:
    assert _wizard_service is not None
    return _wizard_service


def get_layout_service() -> LayoutService:
    return _layout_service


def get_cache() -> QueryCache:
    return _cache


def get_wizard_repo() -> WizardRepository:
    return _wizard_repo
