# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Wizard session storage.
Bounded in-memory store; the oldest session is evicted when full and idle
sessions expire after the configured TTL.
"""

import time
from collections import OrderedDict
from typing import Callable, Optional

from hrportal.services.wizard import EmployeeWizard


class WizardRepository:
    """In-memory wizard session storage."""

    def __init__(
        self,
        max_sessions: int,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._store: "OrderedDict[str, EmployeeWizard]" = OrderedDict()
        self._max = max_sessions
        self._ttl = ttl_seconds
        self._clock = clock

    # ── Read ──

    def get(self, wizard_id: str) -> Optional[EmployeeWizard]:
        self.expire()
        return self._store.get(wizard_id)

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def save(self, wizard: EmployeeWizard) -> None:
        self.expire()
        self._store[wizard.id] = wizard
        self._store.move_to_end(wizard.id)
        while len(self._store) > self._max:
            self._store.popitem(last=False)

    def delete(self, wizard_id: str) -> Optional[EmployeeWizard]:
        return self._store.pop(wizard_id, None)

    # ── Bulk / internal ──

    def expire(self) -> int:
        now = self._clock()
        stale = [k for k, w in self._store.items() if now - w.touched_at > self._ttl]
        for k in stale:
            del self._store[k]
        return len(stale)

    def clear(self) -> None:
        self._store.clear()
