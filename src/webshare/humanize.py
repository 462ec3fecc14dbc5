# Display helpers for byte counts and timestamps.
# Created: 2026-10-17

from __future__ import annotations

from datetime import datetime

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def human_size(num_bytes: int | float) -> str:
    """Format a byte count with one decimal: ``1536 -> "1.5 KB"``."""
    value = float(num_bytes)
    unit = 0
    while abs(value) >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.1f} {SIZE_UNITS[unit]}"


def human_time(moment: datetime | float) -> str:
    """Format a datetime (or POSIX timestamp) as ``YYYY-MM-DD HH:MM:SS``."""
    if not isinstance(moment, datetime):
        moment = datetime.fromtimestamp(moment)
    return moment.strftime(TIME_FORMAT)
