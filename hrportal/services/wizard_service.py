# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Employee creation wizard sessions.
Loads reference data, applies draft changes and transitions, and submits the
finished payload to the backend.
"""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

from hrportal.core.logging import get_logger
from hrportal.metrics import (
    ACTIVE_WIZARDS,
    WIZARD_STEP_BLOCKED,
    WIZARDS_STARTED,
    WIZARDS_SUBMITTED,
)
from hrportal.models.domain import Department, Role
from hrportal.repositories.wizard_repository import WizardRepository
from hrportal.services import hierarchy, query_keys
from hrportal.services.backend_client import DataAccessError
from hrportal.services.hr_api import HRApi
from hrportal.services.query_cache import QueryCache
from hrportal.services.reference_service import ReferenceService
from hrportal.services.wizard import EmployeeWizard, WizardTransitionError

logger = get_logger(__name__)


class WizardService:
    """Business logic around ``EmployeeWizard`` sessions."""

    def __init__(
        self,
        wizard_repo: WizardRepository,
        references: ReferenceService,
        hr_api: HRApi,
        cache: QueryCache,
    ) -> None:
        self._wizards = wizard_repo
        self._references = references
        self._api = hr_api
        self._cache = cache

    # ── Lifecycle ──

    async def start(self) -> EmployeeWizard:
        """Open a wizard. Departments and roles load side by side; either may fail alone."""
        departments, roles, warnings = await self._load_references()
        wizard = EmployeeWizard(departments=departments, roles=roles, warnings=warnings)
        self._wizards.save(wizard)
        WIZARDS_STARTED.inc()
        ACTIVE_WIZARDS.set(self._wizards.count())
        logger.info(
            "Wizard started with %d warning(s)", len(warnings),
            extra={"wizard_id": wizard.id},
        )
        return wizard

    def get(self, wizard_id: str) -> EmployeeWizard:
        wizard = self._wizards.get(wizard_id)
        if wizard is None:
            raise KeyError(f"Wizard '{wizard_id}' not found")
        return wizard

    def discard(self, wizard_id: str) -> None:
        if self._wizards.delete(wizard_id) is None:
            raise KeyError(f"Wizard '{wizard_id}' not found")
        ACTIVE_WIZARDS.set(self._wizards.count())
        logger.info("Wizard discarded", extra={"wizard_id": wizard_id})

    # ── Draft & transitions ──

    async def update(self, wizard_id: str, changes: Dict[str, Any]) -> EmployeeWizard:
        wizard = self.get(wizard_id)
        await self._retry_references(wizard)
        wizard.update(changes)
        return wizard

    async def next(self, wizard_id: str) -> bool:
        wizard = self.get(wizard_id)
        await self._retry_references(wizard)
        step = wizard.step
        advanced = wizard.next()
        if not advanced:
            WIZARD_STEP_BLOCKED.labels(step=step.name.lower()).inc()
            logger.info(
                "Wizard step %s blocked: fields=%s", step.name, sorted(wizard.errors),
                extra={"wizard_id": wizard_id},
            )
        return advanced

    def back(self, wizard_id: str) -> EmployeeWizard:
        wizard = self.get(wizard_id)
        wizard.back()
        return wizard

    # ── Reference data ──

    async def _load_references(
        self,
        departments: Optional[List[Department]] = None,
        roles: Optional[List[Role]] = None,
    ) -> Tuple[List[Department], List[Role], List[str]]:
        """Fetch both lists; a failed one falls back to the given list and adds a warning."""
        loaded_departments, loaded_roles = await asyncio.gather(
            self._references.departments(),
            self._references.roles(),
            return_exceptions=True,
        )
        warnings: List[str] = []
        if isinstance(loaded_departments, BaseException):
            warnings.append(_describe(loaded_departments))
            loaded_departments = departments or []
        if isinstance(loaded_roles, BaseException):
            warnings.append(_describe(loaded_roles))
            loaded_roles = roles or []
        return loaded_departments, loaded_roles, warnings

    async def _retry_references(self, wizard: EmployeeWizard) -> None:
        """Reload the lists a session opened without."""
        if not wizard.warnings:
            return
        departments, roles, warnings = await self._load_references(
            wizard.departments, wizard.roles
        )
        wizard.set_references(departments, roles, warnings)
        if not warnings:
            logger.info("Wizard reference data recovered", extra={"wizard_id": wizard.id})

    # ── Dropdown data ──

    async def candidates(self, wizard_id: str) -> Dict[str, Any]:
        """Manager / team lead options for the selected department and role."""
        wizard = self.get(wizard_id)
        department_id = wizard.draft.department_id
        constraint = wizard.constraint
        if department_id is None:
            employees = []
        else:
            employees = await self._references.candidate_pool(department_id)
        options = hierarchy.assignment_options(constraint, employees, department_id)
        return {
            "departmentId": department_id,
            "constraint": constraint.model_dump(by_alias=True),
            "managers": options["managers"],
            "teamLeads": options["team_leads"],
            "managerEnabled": options["manager_enabled"],
            "teamLeadEnabled": options["team_lead_enabled"],
        }

    async def units(self, wizard_id: str) -> Dict[str, Any]:
        wizard = self.get(wizard_id)
        department_id = wizard.draft.department_id
        if department_id is None or wizard.department_form not in ("sales", "marketing", "production"):
            return {"departmentId": department_id, "units": []}
        units = await self._references.units(department_id)
        return {"departmentId": department_id, "units": units}

    # ── Submit ──

    async def submit(self, wizard_id: str) -> Dict[str, Any]:
        """Create the employee.

        Returns ``{"submitted": False}`` when validation sent the wizard back
        to a step; raises ``DataAccessError`` when the backend refuses, with
        the session kept and its ``submit_error`` set. Only one submit per
        session may be in flight; a second raises ``WizardTransitionError``.
        """
        wizard = self.get(wizard_id)
        if wizard.submitting:
            raise WizardTransitionError("A submit for this wizard is already in progress")
        payload = wizard.build_payload()
        if payload is None:
            WIZARDS_SUBMITTED.labels(outcome="invalid").inc()
            return {"submitted": False}

        wizard.submit_error = None
        wizard.submitting = True
        try:
            created = await self._api.create_complete_employee(payload)
        except DataAccessError as exc:
            wizard.submit_error = exc.message
            WIZARDS_SUBMITTED.labels(outcome="failed").inc()
            logger.warning(
                "Wizard submit failed: %s", exc.message,
                extra={"wizard_id": wizard_id, "upstream_status": exc.status},
            )
            raise
        finally:
            wizard.submitting = False

        self._cache.invalidate(query_keys.EMPLOYEES)
        self._cache.invalidate(query_keys.HR_STATISTICS)
        self._wizards.delete(wizard_id)
        ACTIVE_WIZARDS.set(self._wizards.count())
        WIZARDS_SUBMITTED.labels(outcome="created").inc()
        logger.info(
            "Employee created via wizard: email=%s", payload["employee"]["email"],
            extra={"wizard_id": wizard_id},
        )
        return {"submitted": True, "employee": created}


def _describe(exc: BaseException) -> str:
    if isinstance(exc, DataAccessError):
        return exc.message
    return str(exc) or type(exc).__name__
