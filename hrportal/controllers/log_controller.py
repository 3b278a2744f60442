# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Access log endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from hrportal.core.config import settings
from hrportal.core.dependencies import get_log_service
from hrportal.services.log_service import LogService

router = APIRouter(prefix="/api/v1/logs", tags=["Logs"])


@router.get("/access")
async def list_access_logs(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    success: Optional[bool] = None,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    service: LogService = Depends(get_log_service),
):
    return await service.list_access_logs({
        "page": page, "limit": limit, "employeeId": employee_id, "success": success,
        "startDate": start_date, "endDate": end_date,
    })


@router.get("/access/stats")
async def access_log_statistics(
    service: LogService = Depends(get_log_service),
):
    return await service.access_log_statistics()
