# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Reference data (departments, roles, units and the role rule lookup).
Read-mostly lists cached with long stale times.
"""

from typing import Any, Dict, List, Optional

from hrportal.core.config import settings
from hrportal.models.domain import Department, Employee, Role, Unit
from hrportal.services import hierarchy, query_keys
from hrportal.services.hr_api import HRApi
from hrportal.services.query_cache import QueryCache


class ReferenceService:
    """Cached departments/roles plus hierarchy lookups."""

    def __init__(self, hr_api: HRApi, cache: QueryCache) -> None:
        self._api = hr_api
        self._cache = cache

    async def departments(self) -> List[Department]:
        return await self._cache.fetch(
            query_keys.DEPARTMENTS,
            lambda: self._api.list_departments(settings.REFERENCE_LIST_LIMIT),
            stale_time=settings.REFERENCE_STALE_SECONDS,
            gc_time=settings.REFERENCE_GC_SECONDS,
        )

    async def roles(self) -> List[Role]:
        return await self._cache.fetch(
            query_keys.ROLES,
            lambda: self._api.list_roles(settings.REFERENCE_LIST_LIMIT),
            stale_time=settings.REFERENCE_STALE_SECONDS,
            gc_time=settings.REFERENCE_GC_SECONDS,
        )

    async def units(self, department_id: int) -> List[Unit]:
        return await self._cache.fetch(
            query_keys.department_units(department_id),
            lambda: self._api.list_department_units(department_id),
            stale_time=settings.REFERENCE_STALE_SECONDS,
            gc_time=settings.REFERENCE_GC_SECONDS,
        )

    async def candidate_pool(self, department_id: int) -> List[Employee]:
        """Active employees of one department, the manager / team lead pool."""
        params = {
            "department": department_id,
            "status": "active",
            "limit": settings.CANDIDATE_LIST_LIMIT,
        }

        async def load() -> List[Employee]:
            page = await self._api.list_employees(params)
            return [
                e for e in page.items
                if e.status in (None, "active") and e.department_id in (None, department_id)
            ]

        return await self._cache.fetch(
            query_keys.candidate_pool(department_id),
            load,
            stale_time=settings.EMPLOYEES_STALE_SECONDS,
        )

    async def constraint(self, role_id: Optional[int]) -> Dict[str, Any]:
        roles = await self.roles()
        role = hierarchy.find_role(role_id, roles)
        constraint = hierarchy.resolve_constraint(role_id, roles)
        return {
            "roleId": role_id,
            "roleName": role.name if role else None,
            "rule": hierarchy.matching_rule(role.name) if role else None,
            "constraint": constraint.model_dump(by_alias=True),
        }
