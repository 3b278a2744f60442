# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Employee table, drawer and edit endpoints.
Thin HTTP layer: all logic lives in EmployeeService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from hrportal.core.config import settings
from hrportal.core.dependencies import get_employee_service
from hrportal.schemas import (
    BonusUpdateRequest,
    EmployeeCreateRequest,
    EmployeeUpdateRequest,
    ShiftUpdateRequest,
    TerminateRequest,
)
from hrportal.services.employee_service import EmployeeService

router = APIRouter(prefix="/api/v1", tags=["Employees"])


@router.get("/employees")
async def list_employees(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    search: Optional[str] = None,
    department: Optional[str] = None,
    role: Optional[str] = None,
    status: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", pattern="^(asc|desc)$"),
    service: EmployeeService = Depends(get_employee_service),
):
    """Filtered, paginated employee table."""
    return await service.list_employees({
        "page": page, "limit": limit, "search": search, "department": department,
        "role": role, "status": status, "sortBy": sort_by, "sortOrder": sort_order,
    })


@router.post("/employees", status_code=201)
async def create_employee(
    payload: EmployeeCreateRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    try:
        return await service.create_employee(payload.model_dump(by_alias=True, exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/employees/terminate")
async def terminate_employee(
    payload: TerminateRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.terminate_employee(
        employee_id=payload.employee_id,
        termination_date=payload.termination_date,
        description=payload.description,
    )


@router.get("/employees/{employee_id}")
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    """Drawer data for one employee."""
    return await service.get_employee(employee_id)


@router.put("/employees/{employee_id}")
async def update_employee(
    employee_id: int,
    payload: EmployeeUpdateRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    changes = payload.model_dump(by_alias=True, exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")
    try:
        return await service.update_employee(employee_id, changes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/employees/{employee_id}/bonus")
async def update_bonus(
    employee_id: int,
    payload: BonusUpdateRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.update_bonus(employee_id, payload.bonus)


@router.patch("/employees/{employee_id}/shift")
async def update_shift(
    employee_id: int,
    payload: ShiftUpdateRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    """Change shift timing; the end defaults to start + 8h."""
    try:
        return await service.update_shift(employee_id, payload.shift_start, payload.shift_end)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/employees/{employee_id}")
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.delete_employee(employee_id)
