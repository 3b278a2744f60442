# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: Production jobs (projects) table and drawer."""

from typing import Any, Dict

from hrportal.core.config import settings
from hrportal.core.logging import get_logger
from hrportal.metrics import MUTATIONS_TOTAL
from hrportal.models.domain import Page, Project
from hrportal.services import query_keys
from hrportal.services.project_api import ProjectApi
from hrportal.services.query_cache import QueryCache

logger = get_logger(__name__)


class ProductionService:

    def __init__(self, project_api: ProjectApi, cache: QueryCache) -> None:
        self._api = project_api
        self._cache = cache

    async def list_projects(self, filters: Dict[str, Any]) -> Page:
        return await self._cache.fetch(
            query_keys.project_list(filters),
            lambda: self._api.list_projects(filters),
            stale_time=settings.EMPLOYEES_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )

    async def get_project(self, project_id: int) -> Project:
        return await self._cache.fetch(
            query_keys.project_detail(project_id),
            lambda: self._api.get_project(project_id),
            stale_time=settings.EMPLOYEE_DETAIL_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )

    async def update_project(self, project_id: int, data: Dict[str, Any]) -> Project:
        if not data:
            raise ValueError("No updates given")
        project = await self._api.update_project(project_id, data)
        self._cache.invalidate(query_keys.PROJECTS)
        MUTATIONS_TOTAL.labels(resource="projects", action="update").inc()
        logger.info("Project updated: id=%s, fields=%s", project_id, sorted(data))
        return project
