# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Departments, roles, units and the role hierarchy lookup.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from hrportal.core.dependencies import get_reference_service
from hrportal.services.reference_service import ReferenceService

router = APIRouter(prefix="/api/v1", tags=["Reference"])


@router.get("/departments")
async def list_departments(
    service: ReferenceService = Depends(get_reference_service),
):
    return await service.departments()


@router.get("/departments/{department_id}/units")
async def list_department_units(
    department_id: int,
    service: ReferenceService = Depends(get_reference_service),
):
    return await service.units(department_id)


@router.get("/roles")
async def list_roles(
    service: ReferenceService = Depends(get_reference_service),
):
    return await service.roles()


@router.get("/hierarchy/constraint")
async def hierarchy_constraint(
    role_id: Optional[int] = Query(None, alias="roleId"),
    service: ReferenceService = Depends(get_reference_service),
):
    """Whether the role may (and must) have a manager and a team lead."""
    return await service.constraint(role_id)
