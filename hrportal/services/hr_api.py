# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: HR accessors for employees, departments, roles and department units.
"""

from typing import Any, Dict, List, Optional

from hrportal.models.domain import Department, Employee, Page, Role, Unit
from hrportal.services.accessors import BaseApi, translate
from hrportal.services.envelopes import decode, decode_page


class HRApi(BaseApi):

    # ── Employees ──

    async def list_employees(self, params: Optional[Dict[str, Any]] = None) -> Page:
        with translate("fetch HR employees"):
            payload = await self._backend.get("/hr/employees", params=params)
            return decode_page(payload, Employee, ("employees",))

    async def get_employee(self, employee_id: int) -> Employee:
        with translate("fetch HR employee"):
            payload = await self._backend.get(f"/hr/employees/{employee_id}")
            return decode(payload, Employee)

    async def create_employee(self, data: Dict[str, Any]) -> Employee:
        with translate("create employee"):
            payload = await self._backend.post("/hr/employees", json=data)
            return decode(payload, Employee)

    async def create_complete_employee(self, data: Dict[str, Any]) -> Any:
        """POST the wizard's payload; the backend replies with a summary object."""
        with translate("create employee"):
            payload = await self._backend.post("/hr/employees/complete", json=data)
            return decode(payload, Any)

    async def update_employee(self, employee_id: int, data: Dict[str, Any]) -> Employee:
        with translate("update employee"):
            payload = await self._backend.put(f"/hr/employees/{employee_id}", json=data)
            return decode(payload, Employee)

    async def update_bonus(self, employee_id: int, bonus: float) -> Employee:
        with translate("update employee bonus"):
            payload = await self._backend.patch(
                f"/hr/employees/{employee_id}/bonus", json={"bonus": bonus}
            )
            return decode(payload, Employee)

    async def update_shift(self, employee_id: int, shift_start: str,
                           shift_end: str) -> Employee:
        with translate("update employee shift"):
            payload = await self._backend.patch(
                f"/hr/employees/{employee_id}/shift",
                json={"shiftStart": shift_start, "shiftEnd": shift_end},
            )
            return decode(payload, Employee)

    async def delete_employee(self, employee_id: int) -> Any:
        with translate("delete employee"):
            return await self._backend.delete(f"/hr/employees/{employee_id}")

    async def terminate_employee(self, employee_id: int, termination_date: str,
                                 description: Optional[str] = None) -> Any:
        body = {"employee_id": employee_id, "termination_date": termination_date}
        if description:
            body["description"] = description
        with translate("terminate employee"):
            return await self._backend.post("/hr/terminate", json=body)

    # ── Reference data ──

    async def list_departments(self, limit: int) -> List[Department]:
        with translate("fetch departments"):
            payload = await self._backend.get("/departments", params={"limit": limit})
            return decode_page(payload, Department, ("departments",)).items

    async def list_roles(self, limit: int) -> List[Role]:
        with translate("fetch roles"):
            payload = await self._backend.get("/roles", params={"limit": limit})
            return decode_page(payload, Role, ("roles",)).items

    async def list_department_units(self, department_id: int) -> List[Unit]:
        with translate("fetch department units"):
            payload = await self._backend.get(f"/hr/employees/{department_id}/department")
            return decode_page(payload, Unit, ("units",)).items
