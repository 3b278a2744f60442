# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Dashboard layout context (sidebar, open drawer).
The caller is identified by the X-Client-ID header.
"""

from fastapi import APIRouter, Depends, Header

from hrportal.core.dependencies import get_layout_service
from hrportal.schemas import LayoutUpdateRequest
from hrportal.services.layout_service import DEFAULT_CLIENT_ID, LayoutService

router = APIRouter(prefix="/api/v1", tags=["Layout"])


@router.get("/layout")
def get_layout(
    client_id: str = Header(DEFAULT_CLIENT_ID, alias="X-Client-ID"),
    service: LayoutService = Depends(get_layout_service),
):
    return service.get(client_id)


@router.put("/layout")
def update_layout(
    payload: LayoutUpdateRequest,
    client_id: str = Header(DEFAULT_CLIENT_ID, alias="X-Client-ID"),
    service: LayoutService = Depends(get_layout_service),
):
    return service.update(client_id, payload.model_dump(exclude_unset=True))


@router.delete("/layout")
def reset_layout(
    client_id: str = Header(DEFAULT_CLIENT_ID, alias="X-Client-ID"),
    service: LayoutService = Depends(get_layout_service),
):
    return service.reset(client_id)
