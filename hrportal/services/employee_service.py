# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Employee table, drawer and edits.
Handles cached list/detail reads and mutations that invalidate the employee keys.
"""

from typing import Any, Dict, Optional

from hrportal.core.config import settings
from hrportal.core.logging import get_logger
from hrportal.metrics import MUTATIONS_TOTAL
from hrportal.models.domain import Employee, Page
from hrportal.services import hierarchy, query_keys
from hrportal.services.hr_api import HRApi
from hrportal.services.query_cache import QueryCache
from hrportal.services.reference_service import ReferenceService
from hrportal.services.shift import derive_shift_end, is_valid_time

logger = get_logger(__name__)


class EmployeeService:
    """Business logic for the employee management pages."""

    def __init__(self, hr_api: HRApi, references: ReferenceService,
                 cache: QueryCache) -> None:
        self._api = hr_api
        self._references = references
        self._cache = cache

    # ── Reads ──

    async def list_employees(self, filters: Dict[str, Any]) -> Page:
        return await self._cache.fetch(
            query_keys.employee_list(filters),
            lambda: self._api.list_employees(filters),
            stale_time=settings.EMPLOYEES_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )

    async def get_employee(self, employee_id: int) -> Employee:
        return await self._cache.fetch(
            query_keys.employee_detail(employee_id),
            lambda: self._api.get_employee(employee_id),
            stale_time=settings.EMPLOYEE_DETAIL_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )

    # ── Writes ──

    async def create_employee(self, data: Dict[str, Any]) -> Employee:
        """Plain create without department or bank records; the wizard uses the complete endpoint."""
        roles = await self._references.roles()
        constraint = hierarchy.resolve_constraint(data.get("roleId"), roles)
        errors = hierarchy.assignment_errors(
            constraint, data.get("managerId"), data.get("teamLeadId")
        )
        if errors:
            field, message = next(iter(errors.items()))
            raise ValueError(f"{field}: {message}")

        employee = await self._api.create_employee(data)
        self._invalidate()
        MUTATIONS_TOTAL.labels(resource="employees", action="create").inc()
        logger.info("Employee created: id=%s", employee.id)
        return employee

    async def update_employee(self, employee_id: int, changes: Dict[str, Any]) -> Employee:
        """PUT an edit. A role change drops the assignments the new role may not hold."""
        changes = dict(changes)
        if changes.get("roleId") is not None:
            roles = await self._references.roles()
            constraint = hierarchy.resolve_constraint(changes["roleId"], roles)
            if not constraint.can_have_manager and changes.get("managerId") is not None:
                raise ValueError("This role cannot have a manager")
            if not constraint.can_have_team_lead and changes.get("teamLeadId") is not None:
                raise ValueError("This role cannot have a team lead")
            if not constraint.can_have_manager:
                changes["managerId"] = None
            if not constraint.can_have_team_lead:
                changes["teamLeadId"] = None

        employee = await self._api.update_employee(employee_id, changes)
        self._invalidate()
        MUTATIONS_TOTAL.labels(resource="employees", action="update").inc()
        logger.info("Employee updated: id=%s, fields=%s", employee_id, sorted(changes))
        return employee

    async def update_bonus(self, employee_id: int, bonus: float) -> Employee:
        employee = await self._api.update_bonus(employee_id, bonus)
        self._invalidate()
        MUTATIONS_TOTAL.labels(resource="employees", action="bonus").inc()
        logger.info("Employee bonus updated: id=%s, bonus=%s", employee_id, bonus)
        return employee

    async def update_shift(self, employee_id: int, shift_start: str,
                           shift_end: Optional[str] = None) -> Employee:
        if not is_valid_time(shift_start):
            raise ValueError("Invalid shift start time")
        if shift_end is None:
            shift_end = derive_shift_end(shift_start)
        elif not is_valid_time(shift_end):
            raise ValueError("Invalid shift end time")

        employee = await self._api.update_shift(employee_id, shift_start, shift_end)
        self._invalidate()
        MUTATIONS_TOTAL.labels(resource="employees", action="shift").inc()
        logger.info(
            "Employee shift updated: id=%s, %s-%s", employee_id, shift_start, shift_end
        )
        return employee

    async def delete_employee(self, employee_id: int) -> Dict[str, Any]:
        result = await self._api.delete_employee(employee_id)
        self._invalidate()
        MUTATIONS_TOTAL.labels(resource="employees", action="delete").inc()
        logger.info("Employee deleted: id=%s", employee_id)
        return result if isinstance(result, dict) else {"message": "Employee deleted"}

    async def terminate_employee(self, employee_id: int, termination_date: str,
                                 description: Optional[str] = None) -> Dict[str, Any]:
        result = await self._api.terminate_employee(employee_id, termination_date, description)
        self._invalidate()
        MUTATIONS_TOTAL.labels(resource="employees", action="terminate").inc()
        logger.info("Employee terminated: id=%s, date=%s", employee_id, termination_date)
        return result if isinstance(result, dict) else {"message": "Employee terminated"}

    def _invalidate(self) -> None:
        self._cache.invalidate(query_keys.EMPLOYEES)
        self._cache.invalidate(query_keys.HR_STATISTICS)
