# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Client management endpoints.
Thin HTTP layer: all logic lives in ClientService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from hrportal.core.config import settings
from hrportal.core.dependencies import get_client_service
from hrportal.schemas import (
    ClientBulkDeleteRequest,
    ClientBulkUpdateRequest,
    ClientCreateRequest,
    ClientUpdateRequest,
)
from hrportal.services.client_service import ClientService

router = APIRouter(prefix="/api/v1", tags=["Clients"])


@router.get("/clients")
async def list_clients(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    search: Optional[str] = None,
    status: Optional[str] = None,
    client_type: Optional[str] = Query(None, alias="type"),
    industry: Optional[str] = None,
    assigned_to: Optional[str] = Query(None, alias="assignedTo"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", pattern="^(asc|desc)$"),
    service: ClientService = Depends(get_client_service),
):
    return await service.list_clients({
        "page": page, "limit": limit, "search": search, "status": status,
        "type": client_type, "industry": industry, "assignedTo": assigned_to,
        "startDate": start_date, "endDate": end_date,
        "sortBy": sort_by, "sortOrder": sort_order,
    })


@router.post("/clients", status_code=201)
async def create_client(
    payload: ClientCreateRequest,
    service: ClientService = Depends(get_client_service),
):
    return await service.create_client(payload.model_dump(by_alias=True, exclude_unset=True))


@router.get("/clients/stats")
async def client_statistics(
    service: ClientService = Depends(get_client_service),
):
    """Numbers for the statistics cards above the table."""
    return await service.statistics()


@router.post("/clients/bulk-update")
async def bulk_update_clients(
    payload: ClientBulkUpdateRequest,
    service: ClientService = Depends(get_client_service),
):
    try:
        return await service.bulk_update(payload.client_ids, payload.updates)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/clients/bulk-delete")
async def bulk_delete_clients(
    payload: ClientBulkDeleteRequest,
    service: ClientService = Depends(get_client_service),
):
    try:
        return await service.bulk_delete(payload.client_ids)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/clients/{client_id}")
async def get_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
):
    return await service.get_client(client_id)


@router.patch("/clients/{client_id}")
async def update_client(
    client_id: str,
    payload: ClientUpdateRequest,
    service: ClientService = Depends(get_client_service),
):
    changes = payload.model_dump(by_alias=True, exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")
    return await service.update_client(client_id, changes)


@router.delete("/clients/{client_id}")
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
):
    return await service.delete_client(client_id)
