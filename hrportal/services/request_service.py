# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: Employee requests (HR approvals) table, drawer and actions."""

from typing import Any, Dict

from hrportal.core.config import settings
from hrportal.core.logging import get_logger
from hrportal.metrics import MUTATIONS_TOTAL
from hrportal.models.domain import EmployeeRequest, Page
from hrportal.services import query_keys
from hrportal.services.query_cache import QueryCache
from hrportal.services.request_api import RequestApi

logger = get_logger(__name__)


class RequestService:

    def __init__(self, request_api: RequestApi, cache: QueryCache) -> None:
        self._api = request_api
        self._cache = cache

    async def list_requests(self, filters: Dict[str, Any]) -> Page:
        return await self._cache.fetch(
            query_keys.request_list(filters),
            lambda: self._api.list_requests(filters),
            stale_time=settings.EMPLOYEES_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )

    async def get_request(self, request_id: int) -> EmployeeRequest:
        return await self._cache.fetch(
            query_keys.request_detail(request_id),
            lambda: self._api.get_request(request_id),
            stale_time=settings.EMPLOYEE_DETAIL_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )

    async def take_action(self, request_id: int, hr_employee_id: int,
                          action: Dict[str, Any]) -> EmployeeRequest:
        updated = await self._api.take_action(request_id, hr_employee_id, action)
        self._cache.invalidate(query_keys.REQUESTS)
        MUTATIONS_TOTAL.labels(resource="requests", action="action").inc()
        logger.info(
            "Request action: id=%s, status=%s, by=%s",
            request_id, action.get("status"), hr_employee_id,
        )
        return updated
