# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Employee creation wizard endpoints.
Thin HTTP layer: all logic lives in WizardService.

Status codes: 404 unknown session, 409 illegal transition, 422 invalid
input or a step that did not validate (body carries the snapshot).
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse

from hrportal.core.dependencies import get_wizard_service
from hrportal.services.wizard import WizardInputError, WizardTransitionError
from hrportal.services.wizard_service import WizardService

router = APIRouter(prefix="/api/v1", tags=["Wizards"])


def _blocked(snapshot: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=422, content=snapshot)


@router.post("/wizards", status_code=201)
async def start_wizard(
    service: WizardService = Depends(get_wizard_service),
):
    """Open a new employee creation wizard at step 1."""
    wizard = await service.start()
    return wizard.snapshot()


@router.get("/wizards/{wizard_id}")
def get_wizard(
    wizard_id: str,
    service: WizardService = Depends(get_wizard_service),
):
    try:
        return service.get(wizard_id).snapshot()
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/wizards/{wizard_id}")
async def update_wizard(
    wizard_id: str,
    changes: Dict[str, Any] = Body(...),
    service: WizardService = Depends(get_wizard_service),
):
    """Merge field changes into the draft."""
    try:
        wizard = await service.update(wizard_id, changes)
        return wizard.snapshot()
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WizardInputError as e:
        raise HTTPException(status_code=422, detail=e.errors)


@router.delete("/wizards/{wizard_id}")
def discard_wizard(
    wizard_id: str,
    service: WizardService = Depends(get_wizard_service),
):
    try:
        service.discard(wizard_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "discarded", "id": wizard_id}


@router.get("/wizards/{wizard_id}/candidates")
async def wizard_candidates(
    wizard_id: str,
    service: WizardService = Depends(get_wizard_service),
):
    """Manager and team lead options for the draft's department and role."""
    try:
        return await service.candidates(wizard_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/wizards/{wizard_id}/units")
async def wizard_units(
    wizard_id: str,
    service: WizardService = Depends(get_wizard_service),
):
    try:
        return await service.units(wizard_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/wizards/{wizard_id}/next")
async def next_step(
    wizard_id: str,
    service: WizardService = Depends(get_wizard_service),
):
    try:
        advanced = await service.next(wizard_id)
        snapshot = service.get(wizard_id).snapshot()
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WizardTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return snapshot if advanced else _blocked(snapshot)


@router.post("/wizards/{wizard_id}/back")
def previous_step(
    wizard_id: str,
    service: WizardService = Depends(get_wizard_service),
):
    try:
        return service.back(wizard_id).snapshot()
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WizardTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/wizards/{wizard_id}/submit")
async def submit_wizard(
    wizard_id: str,
    service: WizardService = Depends(get_wizard_service),
):
    """Create the employee from a complete draft."""
    try:
        wizard = service.get(wizard_id)
        result = await service.submit(wizard_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WizardTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not result["submitted"]:
        return _blocked(wizard.snapshot())
    return JSONResponse(status_code=201, content=result)
