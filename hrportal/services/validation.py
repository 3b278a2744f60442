# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: wizard page validation. Pure computation, no side effects.

Each validator returns ``{field: message}``; an empty dict means the page is
complete. Keys are the camelCase field names the dashboard renders under.
"""

import re
from typing import Any, Dict, Optional

from hrportal.models.domain import HierarchyConstraint
from hrportal.models.draft import (
    BankAccountDraft,
    EmployeeDraft,
    SECTION_MODELS,
)
from hrportal.services.hierarchy import assignment_errors
from hrportal.services.shift import is_valid_time

REQUIRED = "Required"
INVALID_VALUE = "Invalid value"
OTHER = "Other"

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

GENDERS = ("male", "female", "others")
MODES_OF_WORK = ("on_site", "hybrid", "remote")
EMPLOYMENT_TYPES = ("full_time", "part_time")
PERIOD_TYPES = ("probation", "permanent", "notice")
MAX_REMOTE_DAYS = 7
MAX_IBAN_LENGTH = 24

MARKETING_PLATFORMS = (
    "Social Media", "SEO", "Email Marketing", "Content Marketing",
    "PPC Advertising", "Influencer Marketing", OTHER,
)
PRODUCTION_SPECIALIZATIONS = (
    "Full Stack Developer", "Frontend Developer", "Backend Developer",
    "Mobile Developer", "DevOps Engineer", "QA Engineer", "UI/UX Designer",
    "Data Engineer", "Machine Learning Engineer", OTHER,
)
BANKS = (
    "HBL", "UBL", "MCB", "ABL", "Meezan Bank", "Bank Alfalah", "Faysal Bank", OTHER,
)

# Department name (lower-cased) -> payload section
DEPARTMENT_FORMS = {
    "hr": "hr",
    "sales": "sales",
    "marketing": "marketing",
    "production": "production",
    "accounts": "accountant",
    "accountant": "accountant",
}


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _require(errors: Dict[str, str], field: str, value: Any) -> bool:
    if _blank(value):
        errors[field] = REQUIRED
        return False
    return True


def _require_choice(errors: Dict[str, str], field: str, value: Any) -> None:
    """A pick-list-or-free-text field: the bare ``Other`` placeholder is not an answer."""
    if _require(errors, field, value) and value.strip() == OTHER:
        errors[field] = "Please specify"


def _require_enum(errors: Dict[str, str], field: str, value: Optional[str], allowed) -> None:
    if _require(errors, field, value) and value not in allowed:
        errors[field] = INVALID_VALUE


# ── Step 1 ──

def validate_employee_details(
    draft: EmployeeDraft, constraint: HierarchyConstraint
) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    _require(errors, "firstName", draft.first_name)
    _require(errors, "lastName", draft.last_name)
    if _require(errors, "email", draft.email) and not EMAIL_RE.match(draft.email.strip()):
        errors["email"] = "Invalid email"
    _require_enum(errors, "gender", draft.gender, GENDERS)
    _require(errors, "cnic", draft.cnic)
    _require(errors, "address", draft.address)
    _require(errors, "dob", draft.dob)
    _require(errors, "emergencyContact", draft.emergency_contact)

    _require(errors, "departmentId", draft.department_id)
    _require(errors, "roleId", draft.role_id)
    errors.update(assignment_errors(constraint, draft.manager_id, draft.team_lead_id))

    _require(errors, "startDate", draft.start_date)
    _require_enum(errors, "modeOfWork", draft.mode_of_work, MODES_OF_WORK)
    if _require(errors, "remoteDaysAllowed", draft.remote_days_allowed):
        if not 0 <= draft.remote_days_allowed <= MAX_REMOTE_DAYS:
            errors["remoteDaysAllowed"] = f"Must be between 0-{MAX_REMOTE_DAYS}"
    _require_enum(errors, "employmentType", draft.employment_type, EMPLOYMENT_TYPES)
    _require_enum(errors, "periodType", draft.period_type, PERIOD_TYPES)
    _require(errors, "dateOfConfirmation", draft.date_of_confirmation)

    if _require(errors, "shiftStart", draft.shift_start) and not is_valid_time(draft.shift_start):
        errors["shiftStart"] = "Invalid time"

    if _require(errors, "bonus", draft.bonus) and draft.bonus < 0:
        errors["bonus"] = "Cannot be negative"
    _require(errors, "passwordHash", draft.password_hash)
    return errors


# ── Step 2 ──

def department_form(department_name: Optional[str]) -> Optional[str]:
    """Payload section for a department, or None when it needs no extra data."""
    return DEPARTMENT_FORMS.get((department_name or "").strip().lower())


def department_section(draft: EmployeeDraft, form: str):
    """The draft's section for ``form``, or a blank one when never touched."""
    section = getattr(draft.department_data, form)
    return section if section is not None else SECTION_MODELS[form]()


def validate_department_details(
    draft: EmployeeDraft, department_name: Optional[str]
) -> Dict[str, str]:
    form = department_form(department_name)
    errors: Dict[str, str] = {}
    if form == "sales":
        sales = department_section(draft, form)
        _require(errors, "salesUnitId", sales.sales_unit_id)
        if _require(errors, "commissionRate", sales.commission_rate):
            if not 0 <= sales.commission_rate <= 100:
                errors["commissionRate"] = "Must be between 0-100"
        if _require(errors, "withholdCommission", sales.withhold_commission):
            if sales.withhold_commission < 0:
                errors["withholdCommission"] = "Cannot be negative"
        _require(errors, "withholdFlag", sales.withhold_flag)
    elif form == "marketing":
        marketing = department_section(draft, form)
        _require(errors, "marketingUnitId", marketing.marketing_unit_id)
        _require_choice(errors, "platformFocus", marketing.platform_focus)
    elif form == "production":
        production = department_section(draft, form)
        _require_choice(errors, "specialization", production.specialization)
        _require(errors, "productionUnitId", production.production_unit_id)
    # hr / accountant carry optional flags only; other departments carry nothing
    return errors


# ── Step 3 ──

def validate_bank_account(enabled: bool, account: BankAccountDraft) -> Dict[str, str]:
    if not enabled:
        return {}
    errors: Dict[str, str] = {}
    _require(errors, "accountTitle", account.account_title)
    _require_choice(errors, "bankName", account.bank_name)
    if _require(errors, "ibanNumber", account.iban_number):
        if len(account.iban_number) > MAX_IBAN_LENGTH:
            errors["ibanNumber"] = f"Must be at most {MAX_IBAN_LENGTH} characters"
    if account.base_salary is None or account.base_salary <= 0:
        errors["baseSalary"] = "Must be greater than 0"
    return errors
