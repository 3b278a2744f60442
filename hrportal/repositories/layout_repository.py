# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Layout state per dashboard client.
"""

from typing import Optional

from hrportal.models.domain import LayoutState


class LayoutRepository:
    """In-memory layout storage keyed by client id."""

    def __init__(self) -> None:
        self._store: dict[str, LayoutState] = {}

    # ── Read ──

    def get(self, client_id: str) -> Optional[LayoutState]:
        return self._store.get(client_id)

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def save(self, client_id: str, state: LayoutState) -> None:
        self._store[client_id] = state

    def delete(self, client_id: str) -> Optional[LayoutState]:
        return self._store.pop(client_id, None)

    def clear(self) -> None:
        self._store.clear()
