# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: employee request (HR approvals) accessors."""

from typing import Any, Dict, Optional

from hrportal.models.domain import EmployeeRequest, Page
from hrportal.services.accessors import BaseApi, translate
from hrportal.services.envelopes import decode, decode_page

REQUESTS_PATH = "/communication/employee/hr-requests"


class RequestApi(BaseApi):

    async def list_requests(self, params: Optional[Dict[str, Any]] = None) -> Page:
        with translate("fetch employee requests"):
            payload = await self._backend.get(REQUESTS_PATH, params=params)
            return decode_page(payload, EmployeeRequest, ("requests",))

    async def get_request(self, request_id: int) -> EmployeeRequest:
        with translate("fetch employee request"):
            payload = await self._backend.get(f"{REQUESTS_PATH}/{request_id}")
            return decode(payload, EmployeeRequest)

    async def take_action(self, request_id: int, hr_employee_id: int,
                          action: Dict[str, Any]) -> EmployeeRequest:
        with translate(f"take action on request {request_id}"):
            payload = await self._backend.post(
                f"{REQUESTS_PATH}/{request_id}/action",
                json=action,
                params={"hrEmployeeId": hr_employee_id},
            )
            return decode(payload, EmployeeRequest)
