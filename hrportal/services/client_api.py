# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: client (CRM) accessors."""

from typing import Any, Dict, List, Optional

from hrportal.models.domain import Client, Page
from hrportal.services.accessors import BaseApi, translate
from hrportal.services.envelopes import decode, decode_page


class ClientApi(BaseApi):

    async def list_clients(self, params: Optional[Dict[str, Any]] = None) -> Page:
        with translate("fetch clients"):
            payload = await self._backend.get("/clients", params=params)
            return decode_page(payload, Client, ("clients",))

    async def get_statistics(self) -> Dict[str, Any]:
        with translate("fetch client statistics"):
            payload = await self._backend.get("/clients/stats")
            return decode(payload, Dict[str, Any])

    async def get_client(self, client_id: str) -> Client:
        with translate("fetch client"):
            payload = await self._backend.get(f"/clients/{client_id}")
            return decode(payload, Client)

    async def create_client(self, data: Dict[str, Any]) -> Client:
        with translate("create client"):
            payload = await self._backend.post("/clients", json=data)
            return decode(payload, Client)

    async def update_client(self, client_id: str, data: Dict[str, Any]) -> Client:
        with translate("update client"):
            payload = await self._backend.patch(f"/clients/{client_id}", json=data)
            return decode(payload, Client)

    async def delete_client(self, client_id: str) -> Any:
        with translate("delete client"):
            return await self._backend.delete(f"/clients/{client_id}")

    async def bulk_update(self, client_ids: List[str], updates: Dict[str, Any]) -> Any:
        with translate("update clients"):
            payload = await self._backend.post(
                "/clients/bulk-update", json={"clientIds": client_ids, "updates": updates}
            )
            return decode(payload, Any)

    async def bulk_delete(self, client_ids: List[str]) -> Any:
        with translate("delete clients"):
            payload = await self._backend.post(
                "/clients/bulk-delete", json={"clientIds": client_ids}
            )
            return decode(payload, Any)
