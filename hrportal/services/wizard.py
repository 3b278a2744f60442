# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Employee creation wizard, a three-step state machine.

    EMPLOYEE_DETAILS (1) -> DEPARTMENT_DETAILS (2) -> BANK_ACCOUNT (3) -> submit

Moving forward validates the current step; moving back never validates.
Draft changes are applied through ``update`` so the reactive rules (role and
department changes, derived shift end) hold after every change.
"""

import time
import uuid
from enum import IntEnum
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from hrportal.models.domain import Department, HierarchyConstraint, Role
from hrportal.models.draft import EmployeeDraft
from hrportal.services import hierarchy, validation


class WizardStep(IntEnum):
    EMPLOYEE_DETAILS = 1
    DEPARTMENT_DETAILS = 2
    BANK_ACCOUNT = 3


class WizardTransitionError(Exception):
    """The requested move is not possible from the current step."""


class WizardInputError(Exception):
    """Draft changes could not be applied; carries a field -> message map."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("Invalid wizard input")
        self.errors = errors


def _camelize(data: Any) -> Any:
    if isinstance(data, dict):
        return {
            (to_camel(k) if isinstance(k, str) and "_" in k else k): _camelize(v)
            for k, v in data.items()
        }
    return data


def _deep_merge(base: Dict[str, Any], changes: Dict[str, Any]) -> None:
    for key, value in changes.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def _leaf_keys(data: Dict[str, Any]) -> set:
    keys = set()
    for key, value in data.items():
        keys.add(key)
        if isinstance(value, dict):
            keys |= _leaf_keys(value)
    return keys


def _input_errors(exc: ValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for err in exc.errors():
        names = [p for p in err["loc"] if isinstance(p, str)]
        field = names[-1] if names else "general"
        if err["type"] == "extra_forbidden":
            errors[field] = "Unknown field"
        else:
            errors.setdefault(field, validation.INVALID_VALUE)
    return errors


class EmployeeWizard:
    """One user's employee creation flow, from empty draft to payload."""

    def __init__(
        self,
        departments: Optional[List[Department]] = None,
        roles: Optional[List[Role]] = None,
        warnings: Optional[List[str]] = None,
        wizard_id: Optional[str] = None,
    ) -> None:
        self.id = wizard_id or str(uuid.uuid4())
        self.departments = departments or []
        self.roles = roles or []
        self.warnings = warnings or []
        self.step = WizardStep.EMPLOYEE_DETAILS
        self.draft = EmployeeDraft()
        self.errors: Dict[str, str] = {}
        self.submit_error: Optional[str] = None
        self.submitting = False
        self.created_at = time.monotonic()
        self.touched_at = self.created_at

    # ── Derived state ──

    @property
    def constraint(self) -> HierarchyConstraint:
        return hierarchy.resolve_constraint(self.draft.role_id, self.roles)

    @property
    def department(self) -> Optional[Department]:
        for dept in self.departments:
            if dept.id == self.draft.department_id:
                return dept
        return None

    @property
    def department_form(self) -> Optional[str]:
        dept = self.department
        return validation.department_form(dept.name if dept else None)

    def validate_step(self, step: WizardStep) -> Dict[str, str]:
        if step == WizardStep.EMPLOYEE_DETAILS:
            return validation.validate_employee_details(self.draft, self.constraint)
        if step == WizardStep.DEPARTMENT_DETAILS:
            dept = self.department
            return validation.validate_department_details(
                self.draft, dept.name if dept else None
            )
        return validation.validate_bank_account(
            self.draft.bank_account_enabled, self.draft.bank_account
        )

    def set_references(self, departments: List[Department], roles: List[Role],
                       warnings: List[str]) -> None:
        self.departments = departments
        self.roles = roles
        self.warnings = warnings

    # ── Draft changes ──

    def update(self, changes: Dict[str, Any]) -> None:
        """Merge ``changes`` (camelCase or snake_case, nested allowed) into the draft."""
        changes = _camelize(changes)
        previous = self.draft
        data = previous.model_dump(by_alias=True)
        _deep_merge(data, changes)
        try:
            draft = EmployeeDraft.model_validate(data)
        except ValidationError as exc:
            raise WizardInputError(_input_errors(exc)) from exc

        if draft.department_id != previous.department_id:
            # candidate lists are per department
            if "managerId" not in changes:
                draft.manager_id = None
            if "teamLeadId" not in changes:
                draft.team_lead_id = None

        if draft.role_id != previous.role_id:
            constraint = hierarchy.resolve_constraint(draft.role_id, self.roles)
            draft.manager_id, draft.team_lead_id = hierarchy.clear_disallowed(
                constraint, draft.manager_id, draft.team_lead_id
            )

        self.draft = draft
        touched = _leaf_keys(changes)
        self.errors = {k: v for k, v in self.errors.items() if k not in touched}
        self.touched_at = time.monotonic()

    # ── Transitions ──

    def next(self) -> bool:
        """Advance when the current step is valid; False leaves ``errors`` set."""
        if self.step == WizardStep.BANK_ACCOUNT:
            raise WizardTransitionError("Already on the last step; submit instead")
        self.errors = self.validate_step(self.step)
        self.touched_at = time.monotonic()
        if self.errors:
            return False
        self.step = WizardStep(self.step + 1)
        return True

    def back(self) -> None:
        if self.step == WizardStep.EMPLOYEE_DETAILS:
            raise WizardTransitionError("Already on the first step")
        self.step = WizardStep(self.step - 1)
        self.errors = {}
        self.touched_at = time.monotonic()

    def build_payload(self) -> Optional[Dict[str, Any]]:
        """Creation payload, or None after moving to the first invalid step."""
        if self.step != WizardStep.BANK_ACCOUNT:
            raise WizardTransitionError("Submit is only available on the last step")
        for step in WizardStep:
            errors = self.validate_step(step)
            if errors:
                self.step = step
                self.errors = errors
                return None
        self.errors = {}

        d = self.draft
        employee: Dict[str, Any] = {
            "firstName": d.first_name.strip(),
            "lastName": d.last_name.strip(),
            "email": d.email.strip(),
            "gender": d.gender,
            "departmentId": d.department_id,
            "roleId": d.role_id,
            "passwordHash": d.password_hash,
            "cnic": d.cnic.strip(),
            "address": d.address.strip(),
            "dob": d.dob,
            "startDate": d.start_date,
            "modeOfWork": d.mode_of_work,
            "remoteDaysAllowed": d.remote_days_allowed,
            "employmentType": d.employment_type,
            "periodType": d.period_type,
            "shiftStart": d.shift_start,
            "shiftEnd": d.shift_end,
            "maritalStatus": d.marital_status,
            "emergencyContact": d.emergency_contact.strip(),
            "dateOfConfirmation": d.date_of_confirmation,
            "bonus": d.bonus,
        }
        if d.phone and d.phone.strip():
            employee["phone"] = d.phone.strip()
        if d.manager_id is not None:
            employee["managerId"] = d.manager_id
        if d.team_lead_id is not None:
            employee["teamLeadId"] = d.team_lead_id

        department_data: Dict[str, Any] = {}
        form = self.department_form
        if form is not None:
            section = validation.department_section(d, form)
            department_data[form] = section.model_dump(by_alias=True)

        payload: Dict[str, Any] = {"employee": employee, "departmentData": department_data}
        if d.bank_account_enabled:
            payload["bankAccount"] = d.bank_account.model_dump(by_alias=True)
        return payload

    # ── Presentation ──

    def snapshot(self) -> Dict[str, Any]:
        constraint = self.constraint
        return {
            "id": self.id,
            "step": self.step.name,
            "stepNumber": int(self.step),
            "draft": self.draft.model_dump(by_alias=True, exclude={"password_hash"}),
            "passwordSet": bool(self.draft.password_hash),
            "errors": dict(self.errors),
            "constraint": constraint.model_dump(by_alias=True),
            "required": {
                "managerId": constraint.can_have_manager,
                "teamLeadId": constraint.can_have_team_lead,
            },
            "departmentForm": self.department_form,
            "shiftEndReadOnly": True,
            "warnings": list(self.warnings),
            "submitError": self.submit_error,
            "submitting": self.submitting,
        }
