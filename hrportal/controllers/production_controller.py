# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Production job endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from hrportal.core.config import settings
from hrportal.core.dependencies import get_production_service
from hrportal.schemas import ProjectUpdateRequest
from hrportal.services.production_service import ProductionService

router = APIRouter(prefix="/api/v1/production", tags=["Production"])


@router.get("/projects")
async def list_projects(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    search: Optional[str] = None,
    status: Optional[str] = None,
    difficulty: Optional[str] = None,
    payment_stage: Optional[str] = Query(None, alias="paymentStage"),
    team_id: Optional[int] = Query(None, alias="teamId"),
    unit_head_id: Optional[int] = Query(None, alias="unitHeadId"),
    filter_by: Optional[str] = Query(None, alias="filterBy"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", pattern="^(asc|desc)$"),
    service: ProductionService = Depends(get_production_service),
):
    return await service.list_projects({
        "page": page, "limit": limit, "search": search, "status": status,
        "difficulty": difficulty, "paymentStage": payment_stage, "teamId": team_id,
        "unitHeadId": unit_head_id, "filterBy": filter_by,
        "sortBy": sort_by, "sortOrder": sort_order,
    })


@router.get("/projects/{project_id}")
async def get_project(
    project_id: int,
    service: ProductionService = Depends(get_production_service),
):
    return await service.get_project(project_id)


@router.put("/projects/{project_id}")
async def update_project(
    project_id: int,
    payload: ProjectUpdateRequest,
    service: ProductionService = Depends(get_production_service),
):
    try:
        return await service.update_project(
            project_id, payload.model_dump(by_alias=True, exclude_unset=True)
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
