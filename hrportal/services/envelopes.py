# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: response envelope decoding.

The backend answers in three shapes and a single endpoint may use any of them:

* ``status``: ``{"status": "success" | "success": true, "data": X, "message"?}``
* ``data``:   ``{"data": X, "message"?}``
* ``bare``:   ``X``

Shapes are tried in that order. A shape only yields a candidate when the
payload structurally matches it (no foreign keys), and the candidate must then
validate against the target type. The first validating candidate wins.
"""

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from pydantic import TypeAdapter, ValidationError

from hrportal.models.domain import Page
from hrportal.services.backend_client import ApiError

ENVELOPE_KEYS = frozenset({"status", "success", "data", "message", "timestamp"})
DATA_KEYS = frozenset({"data", "message"})
PAGE_ITEM_KEYS: Tuple[str, ...] = ("data", "items", "results")


class EnvelopeDecodeError(Exception):
    """No envelope shape produced a value of the expected type."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


def _raise_if_error_envelope(payload: Any) -> None:
    if not isinstance(payload, dict):
        return
    if payload.get("status") == "error" or payload.get("success") is False:
        message = payload.get("message") or payload.get("error") or "Request failed"
        if isinstance(message, list):
            message = "; ".join(str(m) for m in message)
        raise ApiError(str(message), 502)


def unwrap(payload: Any) -> List[Tuple[str, Any]]:
    """Return ``(shape, candidate)`` pairs in match order."""
    _raise_if_error_envelope(payload)
    candidates: List[Tuple[str, Any]] = []
    if isinstance(payload, dict) and "data" in payload:
        keys = set(payload)
        is_success = payload.get("status") == "success" or payload.get("success") is True
        if is_success and keys <= ENVELOPE_KEYS:
            candidates.append(("status", payload["data"]))
        elif keys <= DATA_KEYS:
            candidates.append(("data", payload["data"]))
    candidates.append(("bare", payload))
    return candidates


def decode(payload: Any, target: Any) -> Any:
    """Decode ``payload`` into ``target`` (a model class or any pydantic type)."""
    adapter = TypeAdapter(target)
    failures: List[str] = []
    for shape, candidate in unwrap(payload):
        try:
            return adapter.validate_python(candidate)
        except ValidationError as exc:
            failures.append(f"{shape}: {exc.error_count()} validation error(s)")
    raise EnvelopeDecodeError("Unexpected response shape", failures)


def _find_items(candidate: dict, resource_keys: Iterable[str]) -> Optional[list]:
    for key in (*resource_keys, *PAGE_ITEM_KEYS):
        value = candidate.get(key)
        if isinstance(value, list):
            return value
    return None


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _page_from_candidate(candidate: Any, page_cls: Any, item_adapter: TypeAdapter,
                         resource_keys: Sequence[str]) -> Page:
    if isinstance(candidate, list):
        return page_cls.build(item_adapter.validate_python(candidate))
    if not isinstance(candidate, dict):
        raise EnvelopeDecodeError("Expected a list or an object")

    raw_items = _find_items(candidate, resource_keys)
    if raw_items is None:
        raise EnvelopeDecodeError("No item list in response")
    # pagination fields may sit beside the list or in a sub-object
    meta = dict(candidate)
    for key in ("meta", "pagination"):
        if isinstance(candidate.get(key), dict):
            meta.update(candidate[key])
    return page_cls.build(
        item_adapter.validate_python(raw_items),
        total=_as_int(meta.get("total")),
        page=_as_int(meta.get("page")),
        limit=_as_int(meta.get("limit")),
        total_pages=_as_int(meta.get("totalPages")),
    )


def decode_page(payload: Any, item_type: Any,
                resource_keys: Sequence[str] = ()) -> Page:
    """Normalise any list response into a ``Page``.

    Accepts a bare list, ``{<resource>: [...], total, page, ...}``,
    ``{items|data: [...], pagination: {...}}`` and each of those wrapped in an
    envelope. ``totalPages`` falls back to ``ceil(total / limit)``, minimum 1.
    """
    page_cls = Page[item_type]
    item_adapter = TypeAdapter(List[item_type])
    failures: List[str] = []
    for shape, candidate in unwrap(payload):
        try:
            return _page_from_candidate(candidate, page_cls, item_adapter, resource_keys)
        except ValidationError as exc:
            failures.append(f"{shape}: {exc.error_count()} validation error(s)")
        except EnvelopeDecodeError as exc:
            failures.append(f"{shape}: {exc.message}")
    raise EnvelopeDecodeError("Unexpected list response shape", failures)
