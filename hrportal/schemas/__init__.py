# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas: the API contract.
Pydantic models used ONLY at the controller (HTTP) boundary. Bodies accept
camelCase (what the dashboard sends) or snake_case.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

REQUEST_STATUSES = ("Pending", "In_Progress", "Resolved", "Rejected", "Cancelled")
REQUEST_PRIORITIES = ("Low", "Medium", "High", "Urgent", "Critical")
DRAWERS = ("employee", "client", "project", "request", "access_log")


class CamelSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OpenCamelSchema(BaseModel):
    """Pass-through body: known fields are checked, the rest go upstream as sent."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


# ── Employee Schemas ──

class EmployeeCreateRequest(OpenCamelSchema):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    department_id: int = Field(..., ge=1)
    role_id: int = Field(..., ge=1)
    manager_id: Optional[int] = None
    team_lead_id: Optional[int] = None


class EmployeeUpdateRequest(OpenCamelSchema):
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    department_id: Optional[int] = None
    role_id: Optional[int] = None
    manager_id: Optional[int] = None
    team_lead_id: Optional[int] = None
    status: Optional[str] = None


class BonusUpdateRequest(CamelSchema):
    bonus: float = Field(..., ge=0)


class ShiftUpdateRequest(CamelSchema):
    shift_start: str = Field(..., min_length=1)
    shift_end: Optional[str] = None


class TerminateRequest(CamelSchema):
    employee_id: int = Field(..., ge=1)
    termination_date: str = Field(..., min_length=1)
    description: Optional[str] = Field(default=None, max_length=2000)


# ── Client Schemas ──

class ClientCreateRequest(OpenCamelSchema):
    client_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3)
    client_type: Optional[str] = None
    company_name: Optional[str] = None
    phone: Optional[str] = None
    account_status: Optional[str] = None


class ClientUpdateRequest(OpenCamelSchema):
    client_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[str] = None
    account_status: Optional[str] = None


class ClientBulkUpdateRequest(CamelSchema):
    client_ids: List[str] = Field(..., min_length=1)
    updates: Dict[str, Any] = Field(..., min_length=1)


class ClientBulkDeleteRequest(CamelSchema):
    client_ids: List[str] = Field(..., min_length=1)


# ── Production Schemas ──

class ProjectUpdateRequest(OpenCamelSchema):
    status: Optional[str] = None
    difficulty_level: Optional[str] = None
    payment_stage: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[str] = None
    live_progress: Optional[float] = Field(default=None, ge=0, le=100)
    team_id: Optional[int] = None


# ── Request Schemas ──

class RequestActionRequest(CamelSchema):
    hr_employee_id: int = Field(..., ge=1)
    status: str
    response_notes: str = ""
    assigned_to: Optional[int] = None
    priority: Optional[str] = None

    @field_validator("status")
    @classmethod
    def check_status(cls, v: str) -> str:
        if v not in REQUEST_STATUSES:
            raise ValueError(f"status must be one of {REQUEST_STATUSES}")
        return v

    @field_validator("priority")
    @classmethod
    def check_priority(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in REQUEST_PRIORITIES:
            raise ValueError(f"priority must be one of {REQUEST_PRIORITIES}")
        return v


# ── Layout Schemas ──

class LayoutUpdateRequest(CamelSchema):
    sidebar_collapsed: Optional[bool] = None
    active_drawer: Optional[str] = None
    drawer_entity_id: Optional[str] = None

    @field_validator("active_drawer")
    @classmethod
    def check_drawer(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in DRAWERS:
            raise ValueError(f"active_drawer must be one of {DRAWERS}")
        return v
