from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Iterable, List

from ..attendance.model import AttendanceRecord
from ..common.rounding import percent
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceStats:
    """Descriptive statistics over one employee's window of records.

    ``punctuality`` only looks at attended days, so absences do not lower
    it. ``attendance_rate`` and ``absenteeism`` share the ``total_days``
    denominator but need not add up to 100.
    """

    total_days: int = 0
    present_count: int = 0
    late_count: int = 0
    absent_count: int = 0
    punctuality: int = 0
    attendance_rate: int = 0
    absenteeism: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


def stats_from_statuses(statuses: Iterable[AttendanceStatus]) -> AttendanceStats:
    statuses = list(statuses)
    total = len(statuses)
    present = sum(1 for s in statuses if s == AttendanceStatus.PRESENT)
    late = sum(1 for s in statuses if s == AttendanceStatus.LATE)
    absent = sum(1 for s in statuses if s == AttendanceStatus.ABSENT)
    attended = present + late

    return AttendanceStats(
        total_days=total,
        present_count=present,
        late_count=late,
        absent_count=absent,
        punctuality=percent(present, attended),
        attendance_rate=percent(attended, total),
        absenteeism=percent(absent, total),
    )


def compute_stats(window_records: Iterable[AttendanceRecord]) -> AttendanceStats:
    """Statistics over persisted records only.

    A day without any record is not an absence here; only records stored
    with status ``absent`` count. See ``fill_absent_days`` for the other
    policy.
    """
    return stats_from_statuses(r.status for r in window_records)


def fill_absent_days(records: Iterable[AttendanceRecord], start: date, end: date) -> List[AttendanceStatus]:
    """Statuses for ``start..end`` with record-less weekdays counted as absent.

    Weekends without a record are ignored. Several records on the same day
    all count, as they would in ``compute_stats``.
    """
    records = list(records)
    statuses = [r.status for r in records if start <= r.work_date <= end]
    seen = {r.work_date for r in records}

    day = start
    while day <= end:
        if day.weekday() < 5 and day not in seen:
            statuses.append(AttendanceStatus.ABSENT)
        day += timedelta(days=1)
    return statuses
