# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Dashboard layout context (sidebar and open drawer) per client.
"""

from typing import Any, Dict

from hrportal.models.domain import LayoutState
from hrportal.repositories.layout_repository import LayoutRepository

DEFAULT_CLIENT_ID = "default"


class LayoutService:
    """Owns layout state; callers identify themselves with a client id."""

    def __init__(self, layout_repo: LayoutRepository) -> None:
        self._layouts = layout_repo

    def get(self, client_id: str = DEFAULT_CLIENT_ID) -> LayoutState:
        return self._layouts.get(client_id) or LayoutState()

    def update(self, client_id: str, changes: Dict[str, Any]) -> LayoutState:
        current = self.get(client_id)
        state = LayoutState.model_validate({**current.model_dump(), **changes})
        if state.active_drawer is None:
            state.drawer_entity_id = None
        self._layouts.save(client_id, state)
        return state

    def reset(self, client_id: str = DEFAULT_CLIENT_ID) -> LayoutState:
        self._layouts.delete(client_id)
        return LayoutState()
