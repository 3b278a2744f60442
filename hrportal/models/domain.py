# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: canonical shapes of backend records, NO FastAPI dependency.
"""

import math
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for backend shapes: camelCase on the wire, snake_case in code."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OpenCamelModel(CamelModel):
    """Detail records keep unknown keys so drawers can show every field."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


# ── Reference data ──

class Department(CamelModel):
    id: int
    name: str
    description: Optional[str] = None


class Role(CamelModel):
    id: int
    name: str
    description: Optional[str] = None


class Unit(CamelModel):
    id: int
    name: str


class NamedRef(CamelModel):
    """Nested ``{id?, name}`` object the backend embeds in records."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )
    id: Optional[int] = None
    name: Optional[str] = None


class PersonRef(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


# ── Records ──

class Employee(OpenCamelModel):
    id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    department_id: Optional[int] = None
    role_id: Optional[int] = None
    department: Optional[NamedRef] = None
    role: Optional[NamedRef] = None
    manager: Optional[PersonRef] = None
    team_lead: Optional[PersonRef] = None
    bonus: Optional[float] = None
    shift_start: Optional[str] = None
    shift_end: Optional[str] = None

    @model_validator(mode="after")
    def _fill_ids_from_nested(self) -> "Employee":
        if self.department_id is None and self.department is not None:
            self.department_id = self.department.id
        if self.role_id is None and self.role is not None:
            self.role_id = self.role.id
        return self

    @property
    def role_name(self) -> str:
        return (self.role.name or "") if self.role else ""


class Client(OpenCamelModel):
    id: str
    client_type: Optional[str] = None
    company_name: Optional[str] = None
    client_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    account_status: Optional[str] = None
    industry: Optional[Any] = None
    assigned_to: Optional[Any] = None

    @model_validator(mode="before")
    @classmethod
    def _stringify_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("id"), int):
            data = {**data, "id": str(data["id"])}
        return data


class Project(OpenCamelModel):
    id: int
    status: Optional[str] = None
    difficulty_level: Optional[str] = None
    payment_stage: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[str] = None
    live_progress: Optional[float] = None
    unit_head_id: Optional[int] = None
    team_id: Optional[int] = None


class EmployeeRequest(OpenCamelModel):
    id: int
    emp_id: Optional[int] = None
    department_id: Optional[int] = None
    request_type: Optional[str] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    assigned_to: Optional[Any] = None


class AccessLog(OpenCamelModel):
    id: int
    employee_id: Optional[int] = None
    success: Optional[bool] = None
    login_time: Optional[str] = None
    logout_time: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    employee: Optional[PersonRef] = None


# ── Pagination ──

class Page(CamelModel, Generic[T]):
    """One page of a list endpoint, whatever shape the backend used."""
    items: List[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 0
    total_pages: int = 1

    @classmethod
    def build(cls, items: List[Any], total: Optional[int] = None,
              page: Optional[int] = None, limit: Optional[int] = None,
              total_pages: Optional[int] = None) -> "Page":
        total = len(items) if total is None else total
        limit = limit or len(items) or 1
        if total_pages is None:
            total_pages = max(1, math.ceil(total / limit))
        return cls(items=items, total=total, page=page or 1, limit=limit,
                   total_pages=max(1, total_pages))


# ── Derived ──

class HierarchyConstraint(CamelModel):
    """Whether a role may (and therefore must) report to a manager / team lead."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )
    can_have_manager: bool
    can_have_team_lead: bool


class LayoutState(CamelModel):
    sidebar_collapsed: bool = False
    active_drawer: Optional[str] = None
    drawer_entity_id: Optional[str] = None
