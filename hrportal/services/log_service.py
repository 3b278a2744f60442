# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: Access log table and statistics."""

from typing import Any, Dict

from hrportal.core.config import settings
from hrportal.models.domain import Page
from hrportal.services import query_keys
from hrportal.services.access_log_api import AccessLogApi
from hrportal.services.query_cache import QueryCache


class LogService:

    def __init__(self, access_log_api: AccessLogApi, cache: QueryCache) -> None:
        self._api = access_log_api
        self._cache = cache

    async def list_access_logs(self, filters: Dict[str, Any]) -> Page:
        return await self._cache.fetch(
            query_keys.access_log_list(filters),
            lambda: self._api.list_logs(filters),
            stale_time=settings.LOGS_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )

    async def access_log_statistics(self) -> Dict[str, Any]:
        return await self._cache.fetch(
            query_keys.ACCESS_LOG_STATS,
            self._api.get_statistics,
            stale_time=settings.STATS_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )
