# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Structured JSON logging for the dashboard service.

All loggers hang off one ``hrportal`` parent that owns the stdout handler.
Context passed with ``extra=`` (request, wizard session, upstream call) is
lifted into top-level JSON keys so log lines can be filtered by it.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from hrportal.core.config import settings

ROOT_LOGGER = "hrportal"

# Keys read from ``extra=``, in output order
CONTEXT_FIELDS = (
    "request_id",
    "wizard_id",
    "method",
    "path",
    "status",
    "duration_ms",
    "upstream_endpoint",
    "upstream_status",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per record; context fields only appear when set."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": settings.SERVICE_NAME,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info and record.exc_info[1]:
            exc = record.exc_info[1]
            entry["error"] = str(exc)
            entry["error_type"] = type(exc).__name__
        return json.dumps(entry, default=str)


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        root.addHandler(handler)
        root.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))
        root.propagate = False
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``hrportal`` parent; ``main`` becomes ``hrportal.main``."""
    root = _configure_root()
    if not name or name == ROOT_LOGGER:
        return root
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
