# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Shared plumbing for the per-resource backend accessors."""

from contextlib import contextmanager
from typing import Iterator

from hrportal.core.logging import get_logger
from hrportal.services.backend_client import ApiError, BackendClient, DataAccessError
from hrportal.services.envelopes import EnvelopeDecodeError

logger = get_logger(__name__)


@contextmanager
def translate(action: str) -> Iterator[None]:
    """Turn backend and decoding failures into ``DataAccessError``.

    ``action`` completes the sentence "Failed to ...", e.g. ``"fetch HR employees"``.
    """
    try:
        yield
    except ApiError as exc:
        logger.warning("Failed to %s: status=%d %s", action, exc.status, exc.message)
        raise DataAccessError(f"Failed to {action}: {exc.message}", exc.status) from exc
    except EnvelopeDecodeError as exc:
        logger.warning("Failed to %s: %s %s", action, exc.message, exc.errors)
        raise DataAccessError(f"Failed to {action}: {exc.message}", 502) from exc


class BaseApi:
    """Holds the shared backend client for one resource family."""

    def __init__(self, backend: BackendClient) -> None:
        self._backend = backend
