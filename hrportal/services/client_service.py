# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Client management table, statistics cards, drawer and bulk actions.
"""

from typing import Any, Dict, List

from hrportal.core.config import settings
from hrportal.core.logging import get_logger
from hrportal.metrics import MUTATIONS_TOTAL
from hrportal.models.domain import Client, Page
from hrportal.services import query_keys
from hrportal.services.client_api import ClientApi
from hrportal.services.query_cache import QueryCache

logger = get_logger(__name__)


class ClientService:
    """Business logic for the client pages."""

    def __init__(self, client_api: ClientApi, cache: QueryCache) -> None:
        self._api = client_api
        self._cache = cache

    async def list_clients(self, filters: Dict[str, Any]) -> Page:
        return await self._cache.fetch(
            query_keys.client_list(filters),
            lambda: self._api.list_clients(filters),
            stale_time=settings.CLIENTS_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )

    async def statistics(self) -> Dict[str, Any]:
        return await self._cache.fetch(
            query_keys.CLIENT_STATS,
            self._api.get_statistics,
            stale_time=settings.STATS_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )

    async def get_client(self, client_id: str) -> Client:
        return await self._cache.fetch(
            query_keys.client_detail(client_id),
            lambda: self._api.get_client(client_id),
            stale_time=settings.CLIENTS_STALE_SECONDS,
            gc_time=settings.CACHE_GC_SECONDS,
        )

    async def create_client(self, data: Dict[str, Any]) -> Client:
        client = await self._api.create_client(data)
        self._cache.invalidate(query_keys.CLIENTS)
        MUTATIONS_TOTAL.labels(resource="clients", action="create").inc()
        logger.info("Client created: id=%s", client.id)
        return client

    async def update_client(self, client_id: str, data: Dict[str, Any]) -> Client:
        client = await self._api.update_client(client_id, data)
        self._cache.invalidate(query_keys.CLIENTS)
        MUTATIONS_TOTAL.labels(resource="clients", action="update").inc()
        logger.info("Client updated: id=%s, fields=%s", client_id, sorted(data))
        return client

    async def delete_client(self, client_id: str) -> Dict[str, Any]:
        await self._api.delete_client(client_id)
        self._cache.invalidate(query_keys.CLIENTS)
        MUTATIONS_TOTAL.labels(resource="clients", action="delete").inc()
        logger.info("Client deleted: id=%s", client_id)
        return {"message": "Client deleted", "id": client_id}

    async def bulk_update(self, client_ids: List[str], updates: Dict[str, Any]) -> Dict[str, Any]:
        if not client_ids:
            raise ValueError("No clients selected")
        if not updates:
            raise ValueError("No updates given")
        result = await self._api.bulk_update(client_ids, updates)
        self._cache.invalidate(query_keys.CLIENTS)
        MUTATIONS_TOTAL.labels(resource="clients", action="bulk_update").inc()
        logger.info("Clients bulk-updated: count=%d, fields=%s", len(client_ids), sorted(updates))
        return {"updated": len(client_ids), "result": result}

    async def bulk_delete(self, client_ids: List[str]) -> Dict[str, Any]:
        if not client_ids:
            raise ValueError("No clients selected")
        result = await self._api.bulk_delete(client_ids)
        self._cache.invalidate(query_keys.CLIENTS)
        MUTATIONS_TOTAL.labels(resource="clients", action="bulk_delete").inc()
        logger.info("Clients bulk-deleted: count=%d", len(client_ids))
        return {"deleted": len(client_ids), "result": result}
