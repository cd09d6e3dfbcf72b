"""Date-time parsing for the posting's instant fields.

Accepted input is exactly `YYYY-MM-DDTHH:MM:SS+HH:MM` (or `-HH:MM`). The
parsed `datetime` keeps its offset and is what gets rendered, so the accepted
format and the emitted one cannot drift apart.
"""

from __future__ import annotations

import re
from datetime import datetime

INSTANT_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}$"

_INSTANT_RE = re.compile(INSTANT_PATTERN)


def parse_instant(value: str) -> datetime:
    """Parse an offset date-time string, raising ValueError if it is not one."""
    if not _INSTANT_RE.match(value):
        raise ValueError("must be a date-time formatted as YYYY-MM-DDTHH:MM:SS+HH:MM")
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        # Right shape, impossible calendar values (month 13, Feb 30, ...).
        raise ValueError(f"is not a valid calendar date-time ({exc})") from exc


def format_instant(value: datetime) -> str:
    return value.isoformat(timespec="seconds")
