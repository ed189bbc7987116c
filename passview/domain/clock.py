from __future__ import annotations

"""Clock formatting for the pass header.

Month names are fixed English strings so the rendered date does not depend on
the process locale.
"""

from datetime import datetime
from typing import Tuple

MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_time(moment: datetime) -> str:
    """Return ``HH:MM:SS`` (24h, zero-padded) for ``moment``."""
    return f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"


def format_date(moment: datetime) -> str:
    """Return ``DD MonthName YYYY`` for ``moment``."""
    return f"{moment.day:02d} {MONTH_NAMES[moment.month - 1]} {moment.year:04d}"


def format_clock(moment: datetime) -> Tuple[str, str]:
    """Return the ``(time, date)`` pair derived from one instant."""
    return format_time(moment), format_date(moment)


__all__ = ["MONTH_NAMES", "format_clock", "format_date", "format_time"]
