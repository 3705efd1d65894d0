from __future__ import annotations

import math
from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def round_minutes(delta: timedelta) -> int:
    """Whole minutes in ``delta``, rounding halves up (a 30s remainder counts)."""
    return int(math.floor(delta.total_seconds() / 60 + 0.5))


def format_elapsed(delta: timedelta) -> str:
    """Render a duration as whole hours and minutes, e.g. ``"1h 35m"``."""
    total_minutes = max(int(delta.total_seconds() // 60), 0)
    return f"{total_minutes // 60}h {total_minutes % 60}m"


def format_report_date(value: datetime) -> str:
    """``Jan 5, 2026`` style date used in attendance exports."""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def format_report_time(value: datetime) -> str:
    """``9:05 AM`` style 12-hour clock time used in attendance exports."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"
