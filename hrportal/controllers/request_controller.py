# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Employee request (HR approval) endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from hrportal.core.dependencies import get_request_service
from hrportal.schemas import RequestActionRequest
from hrportal.services.request_service import RequestService

router = APIRouter(prefix="/api/v1", tags=["Requests"])


@router.get("/requests")
async def list_requests(
    status: Optional[str] = None,
    priority: Optional[str] = None,
    department_id: Optional[int] = Query(None, alias="departmentId"),
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    assigned_to: Optional[int] = Query(None, alias="assignedTo"),
    request_type: Optional[str] = Query(None, alias="requestType"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    service: RequestService = Depends(get_request_service),
):
    return await service.list_requests({
        "status": status, "priority": priority, "departmentId": department_id,
        "empId": employee_id, "assignedTo": assigned_to, "requestType": request_type,
        "startDate": start_date, "endDate": end_date,
    })


@router.get("/requests/{request_id}")
async def get_request(
    request_id: int,
    service: RequestService = Depends(get_request_service),
):
    return await service.get_request(request_id)


@router.post("/requests/{request_id}/action")
async def take_action(
    request_id: int,
    payload: RequestActionRequest,
    service: RequestService = Depends(get_request_service),
):
    """Approve, reject or otherwise progress a request."""
    action = payload.model_dump(by_alias=True, exclude_none=True, exclude={"hr_employee_id"})
    return await service.take_action(request_id, payload.hr_employee_id, action)
