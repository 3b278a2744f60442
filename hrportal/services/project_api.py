# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: production job (project) accessors."""

from typing import Any, Dict, Optional

from hrportal.models.domain import Page, Project
from hrportal.services.accessors import BaseApi, translate
from hrportal.services.envelopes import decode, decode_page


class ProjectApi(BaseApi):

    async def list_projects(self, params: Optional[Dict[str, Any]] = None) -> Page:
        with translate("fetch projects"):
            payload = await self._backend.get("/projects", params=params)
            return decode_page(payload, Project, ("projects",))

    async def get_project(self, project_id: int) -> Project:
        with translate("fetch project"):
            payload = await self._backend.get(f"/projects/{project_id}")
            return decode(payload, Project)

    async def update_project(self, project_id: int, data: Dict[str, Any]) -> Project:
        with translate("update project"):
            payload = await self._backend.put(f"/projects/{project_id}", json=data)
            return decode(payload, Project)
