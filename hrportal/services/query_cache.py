# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: query cache for backend reads.

* a fresh entry (younger than its stale time) is served without a call;
* concurrent reads of one key share a single in-flight call;
* failures are never stored and reach every waiter;
* when the caller that started a call is cancelled, its waiters start a
  fresh call instead of being cancelled with it;
* ``invalidate(prefix)`` drops matching entries and detaches matching
  in-flight calls, whose results are still returned to their waiters but
  not stored;
* entries unused for longer than their gc time are pruned.
"""

import asyncio
import time
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from hrportal.core.logging import get_logger
from hrportal.metrics import (
    CACHE_DEDUPLICATED,
    CACHE_HITS,
    CACHE_INVALIDATIONS,
    CACHE_MISSES,
)

logger = get_logger(__name__)

QueryKey = Tuple[Any, ...]


class _Entry:
    __slots__ = ("value", "fetched_at", "last_used", "gc_time")

    def __init__(self, value: Any, now: float, gc_time: float):
        self.value = value
        self.fetched_at = now
        self.last_used = now
        self.gc_time = gc_time


class _FetchAbandoned(Exception):
    """The shared call was cancelled by the caller that started it."""


def _label(key: QueryKey) -> str:
    return str(key[0]) if key else "unknown"


class QueryCache:
    """Keyed cache with request de-duplication and prefix invalidation."""

    def __init__(
        self,
        default_stale: float = 0.0,
        default_gc: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_stale = default_stale
        self._default_gc = default_gc
        self._clock = clock
        self._entries: Dict[QueryKey, _Entry] = {}
        self._inflight: Dict[QueryKey, asyncio.Future] = {}

    # ── Read ──

    async def fetch(
        self,
        key: QueryKey,
        fn: Callable[[], Awaitable[Any]],
        stale_time: Optional[float] = None,
        gc_time: Optional[float] = None,
    ) -> Any:
        stale = self._default_stale if stale_time is None else stale_time
        now = self._clock()

        entry = self._entries.get(key)
        if entry is not None and now - entry.fetched_at < stale:
            entry.last_used = now
            CACHE_HITS.labels(resource=_label(key)).inc()
            return entry.value

        pending = self._inflight.get(key)
        if pending is not None:
            CACHE_DEDUPLICATED.labels(resource=_label(key)).inc()
            try:
                return await asyncio.shield(pending)
            except _FetchAbandoned:
                return await self.fetch(key, fn, stale_time, gc_time)

        CACHE_MISSES.labels(resource=_label(key)).inc()
        self.prune()
        future = asyncio.get_running_loop().create_future()
        self._inflight[key] = future
        try:
            value = await fn()
        except asyncio.CancelledError:
            self._detach(key, future)
            future.set_exception(_FetchAbandoned())
            future.exception()
            raise
        except Exception as exc:
            self._detach(key, future)
            future.set_exception(exc)
            future.exception()  # mark retrieved when nobody else waits
            raise

        if self._detach(key, future):
            self._entries[key] = _Entry(
                value, self._clock(),
                self._default_gc if gc_time is None else gc_time,
            )
        else:
            logger.info("Discarding late response for invalidated key=%s", key)
        future.set_result(value)
        return value

    def peek(self, key: QueryKey) -> Any:
        entry = self._entries.get(key)
        return entry.value if entry is not None else None

    def is_pending(self, key: QueryKey) -> bool:
        return key in self._inflight

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: QueryKey) -> bool:
        return key in self._entries

    # ── Write ──

    def invalidate(self, prefix: QueryKey) -> int:
        """Drop every entry and in-flight call whose key starts with ``prefix``."""
        size = len(prefix)
        stale_keys = [k for k in self._entries if k[:size] == prefix]
        for k in stale_keys:
            del self._entries[k]
        for k in [k for k in self._inflight if k[:size] == prefix]:
            del self._inflight[k]
        CACHE_INVALIDATIONS.labels(resource=_label(prefix)).inc()
        logger.info("Cache invalidated: prefix=%s, entries=%d", prefix, len(stale_keys))
        return len(stale_keys)

    def prune(self) -> int:
        now = self._clock()
        expired = [k for k, e in self._entries.items() if now - e.last_used > e.gc_time]
        for k in expired:
            del self._entries[k]
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()
        self._inflight.clear()

    def _detach(self, key: QueryKey, future: asyncio.Future) -> bool:
        """Remove ``future`` from the in-flight table; False if it was superseded."""
        if self._inflight.get(key) is future:
            del self._inflight[key]
            return True
        return False
