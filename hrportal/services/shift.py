# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: shift timing helpers."""

import re
from typing import Optional

SHIFT_HOURS = 8
DEFAULT_SHIFT_START = "09:00"

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def is_valid_time(value: Optional[str]) -> bool:
    return bool(value) and _TIME_RE.match(value) is not None


def derive_shift_end(shift_start: Optional[str]) -> Optional[str]:
    """Start plus eight hours, wrapping past midnight. None for unusable input."""
    if not is_valid_time(shift_start):
        return None
    hours, minutes = (int(p) for p in shift_start.split(":"))
    return f"{(hours + SHIFT_HOURS) % 24:02d}:{minutes:02d}"
