# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: REST backend client over one shared httpx.AsyncClient, single attempt.
Transport and status failures become ApiError; nothing is retried.
"""

import time
from typing import Any, Dict, Optional

import httpx

from hrportal.core.logging import get_logger
from hrportal.metrics import BACKEND_LATENCY, BACKEND_REQUESTS, backend_endpoint

logger = get_logger(__name__)


class ApiError(Exception):
    """Non-success response or transport failure from the REST backend.

    ``status`` is the HTTP status, 408 for a timeout and 0 when no response
    was received at all.
    """

    def __init__(self, message: str, status: int = 0):
        super().__init__(message)
        self.message = message
        self.status = status


class DataAccessError(Exception):
    """Human-readable failure raised by the accessor functions.

    Callers only get a message string; ``status`` is kept so the HTTP layer
    can pick a response code.
    """

    def __init__(self, message: str, status: int = 0):
        super().__init__(message)
        self.message = message
        self.status = status


def clean_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop unset filter values and render booleans the way the backend expects."""
    if not params:
        return {}
    cleaned: Dict[str, Any] = {}
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned


def _error_message(resp: httpx.Response) -> str:
    fallback = f"HTTP {resp.status_code}: {resp.reason_phrase}"
    try:
        body = resp.json()
    except ValueError:
        return fallback
    if isinstance(body, dict):
        message = body.get("message") or body.get("detail") or body.get("error")
        if isinstance(message, list):
            return "; ".join(str(m) for m in message)
        if message:
            return str(message)
    return fallback


class BackendClient:
    """Thin JSON wrapper over the shared AsyncClient."""

    def __init__(self, http_client: httpx.AsyncClient):
        self._client = http_client

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        endpoint = backend_endpoint(path)
        context = {"method": method, "upstream_endpoint": endpoint}
        start = time.monotonic()
        try:
            resp = await self._client.request(
                method, path, params=clean_params(params), json=json,
            )
        except httpx.TimeoutException as exc:
            BACKEND_REQUESTS.labels(method=method, endpoint=endpoint, status="timeout").inc()
            logger.warning("Backend timeout: %s", exc, extra={**context, "upstream_status": 408})
            raise ApiError("Request timeout", 408) from exc
        except httpx.RequestError as exc:
            BACKEND_REQUESTS.labels(method=method, endpoint=endpoint, status="unreachable").inc()
            logger.warning("Backend unreachable: %s", exc, extra=context)
            raise ApiError(str(exc) or "Network error", 0) from exc
        finally:
            BACKEND_LATENCY.labels(method=method, endpoint=endpoint).observe(
                time.monotonic() - start
            )

        BACKEND_REQUESTS.labels(
            method=method, endpoint=endpoint, status=str(resp.status_code)
        ).inc()

        if resp.status_code >= 400:
            message = _error_message(resp)
            logger.warning(
                "Backend error: %s", message,
                extra={**context, "upstream_status": resp.status_code},
            )
            raise ApiError(message, resp.status_code)

        if resp.status_code in (204, 304) or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise ApiError("Invalid JSON response", resp.status_code) from exc

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None,
                   params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("POST", path, params=params, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def ping(self, path: str) -> int:
        """Return the backend's status code for a health probe."""
        resp = await self._client.get(path)
        return resp.status_code
