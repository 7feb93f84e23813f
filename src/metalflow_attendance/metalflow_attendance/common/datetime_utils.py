from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.exceptions import ValidationError

SECONDS_PER_HOUR = 3600.0


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc


def parse_time_of_day(value: str) -> time:
    """Parse HH:MM (or HH:MM:SS) into a time of day."""
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except (AttributeError, ValueError):
            continue
    raise ValidationError(f"Invalid time {value!r}, expected HH:MM")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier. Engine functions take
    ``now`` as a parameter; only the service layer falls back to this.
    """
    return datetime.now()


def at_time_of_day(instant: datetime, value: time) -> datetime:
    """Same calendar day (and tzinfo) as ``instant``, at ``value``."""
    return instant.replace(
        hour=value.hour,
        minute=value.minute,
        second=value.second,
        microsecond=0,
    )


def anchor_on(day: date, value: time, tzinfo=None) -> datetime:
    return datetime.combine(day, value, tzinfo=tzinfo)


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / SECONDS_PER_HOUR


def overlap_hours(start: datetime, end: datetime, window_start: datetime, window_end: datetime) -> float:
    """Length in hours of the intersection of two intervals, 0 if disjoint."""
    lo = max(start, window_start)
    hi = min(end, window_end)
    if hi <= lo:
        return 0.0
    return hours_between(lo, hi)


def week_bounds(today: date) -> tuple[date, date]:
    """Monday and Friday of the week containing ``today``.

    Sunday belongs to the week that started six days earlier.
    """
    monday = today - timedelta(days=today.weekday())
    return monday, monday + timedelta(days=4)


def format_hhmm(value: Optional[datetime]) -> str:
    return value.strftime("%H:%M") if value else "-"
