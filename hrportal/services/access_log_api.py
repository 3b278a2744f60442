# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: login/logout access log accessors."""

from typing import Any, Dict, Optional

from hrportal.models.domain import AccessLog, Page
from hrportal.services.accessors import BaseApi, translate
from hrportal.services.envelopes import decode, decode_page


class AccessLogApi(BaseApi):

    async def list_logs(self, params: Optional[Dict[str, Any]] = None) -> Page:
        # Some deployments answer the list call with the stats shape
        # (``recentActivity``); both decode into a page.
        with translate("fetch access logs"):
            payload = await self._backend.get("/auth/access-logs", params=params)
            return decode_page(payload, AccessLog, ("logs", "recentActivity"))

    async def get_statistics(self) -> Dict[str, Any]:
        with translate("fetch access logs statistics"):
            payload = await self._backend.get("/auth/access-logs/stats")
            return decode(payload, Dict[str, Any])
