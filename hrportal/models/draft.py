# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Draft models for the employee creation wizard's in-progress form data.

Every field is optional: an unset field is ``None`` and a missing value is a
validation message, not a type error. Only malformed types (text in a number
field, unknown keys) are rejected at this level.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from hrportal.services.shift import DEFAULT_SHIFT_START, derive_shift_end


class DraftModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
        allow_inf_nan=False,
    )


# ── Department sections ──

class SalesData(DraftModel):
    sales_unit_id: Optional[int] = None
    commission_rate: Optional[float] = None
    withhold_commission: Optional[float] = None
    withhold_flag: Optional[bool] = None
    target_amount: Optional[float] = 0
    sales_bonus: Optional[float] = 0


class MarketingData(DraftModel):
    marketing_unit_id: Optional[int] = None
    platform_focus: Optional[str] = None
    total_campaigns_run: Optional[int] = 0


class ProductionData(DraftModel):
    specialization: Optional[str] = None
    production_unit_id: Optional[int] = None
    projects_completed: Optional[int] = 0


class HRData(DraftModel):
    attendance_permission: bool = False
    salary_permission: bool = False
    commission_permission: bool = False
    employee_add_permission: bool = False
    terminations_handle: bool = False
    monthly_request_approvals: bool = False
    targets_set: bool = False
    bonuses_set: bool = False
    shift_timing_set: bool = False


class AccountantData(DraftModel):
    liabilities_permission: bool = False
    salary_permission: bool = False
    sales_permission: bool = False
    invoices_permission: bool = False
    expenses_permission: bool = False
    assets_permission: bool = False
    revenues_permission: bool = False


class DepartmentData(DraftModel):
    hr: Optional[HRData] = None
    sales: Optional[SalesData] = None
    marketing: Optional[MarketingData] = None
    production: Optional[ProductionData] = None
    accountant: Optional[AccountantData] = None


SECTION_MODELS = {
    "hr": HRData,
    "sales": SalesData,
    "marketing": MarketingData,
    "production": ProductionData,
    "accountant": AccountantData,
}


# ── Bank account ──

class BankAccountDraft(DraftModel):
    account_title: Optional[str] = None
    bank_name: Optional[str] = None
    iban_number: Optional[str] = None
    base_salary: Optional[float] = None

    @field_validator("iban_number", mode="before")
    @classmethod
    def _upper_iban(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


# ── Employee ──

class EmployeeDraft(DraftModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    cnic: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    dob: Optional[str] = None
    marital_status: bool = False
    emergency_contact: Optional[str] = None
    department_id: Optional[int] = None
    role_id: Optional[int] = None
    manager_id: Optional[int] = None
    team_lead_id: Optional[int] = None
    start_date: Optional[str] = None
    mode_of_work: Optional[str] = None
    remote_days_allowed: Optional[int] = None
    employment_type: Optional[str] = None
    period_type: Optional[str] = None
    date_of_confirmation: Optional[str] = None
    shift_start: Optional[str] = DEFAULT_SHIFT_START
    shift_end: Optional[str] = None
    bonus: Optional[float] = None
    password_hash: Optional[str] = None
    department_data: DepartmentData = Field(default_factory=DepartmentData)
    bank_account_enabled: bool = False
    bank_account: BankAccountDraft = Field(default_factory=BankAccountDraft)

    @model_validator(mode="after")
    def _derive_shift_end(self) -> "EmployeeDraft":
        # shiftEnd is never taken from input
        self.shift_end = derive_shift_end(self.shift_start)
        return self
