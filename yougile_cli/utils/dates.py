"""Deadline parsing and formatting.

Yougile stores deadlines as epoch milliseconds. Dates typed by the user are
interpreted as local midnight.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

# (pattern, order of the year/month/day groups)
DATE_FORMATS = [
    (re.compile(r"^(\d{4})-(\d{2})-(\d{2})$"), ("y", "m", "d")),   # 2024-03-31
    (re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})$"), ("d", "m", "y")),  # 31.03.2024
    (re.compile(r"^(\d{2})/(\d{2})/(\d{4})$"), ("d", "m", "y")),    # 31/03/2024
]

DATE_HINT = "YYYY-MM-DD or DD.MM.YYYY"


def parse_date(text: str) -> Optional[datetime]:
    """Parse a user-typed date, or return None if it matches no format."""
    text = text.strip()
    for pattern, order in DATE_FORMATS:
        match = pattern.match(text)
        if not match:
            continue
        parts = dict(zip(order, (int(g) for g in match.groups())))
        try:
            return datetime(parts["y"], parts["m"], parts["d"])
        except ValueError:
            return None
    return None


def to_epoch_ms(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


def from_epoch_ms(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000)


def safe_from_epoch_ms(ms: int) -> Optional[datetime]:
    """Like :func:`from_epoch_ms`, but None for timestamps outside the datetime range."""
    try:
        return from_epoch_ms(ms)
    except (ValueError, OverflowError, OSError):
        return None


def format_deadline(ms: int) -> str:
    """Format as YYYY-MM-DD; unrepresentable timestamps are shown raw."""
    dt = safe_from_epoch_ms(ms)
    return dt.strftime("%Y-%m-%d") if dt else str(ms)


def is_overdue(ms: int, now: datetime | None = None) -> bool:
    dt = safe_from_epoch_ms(ms)
    return dt is not None and dt < (now or datetime.now())
