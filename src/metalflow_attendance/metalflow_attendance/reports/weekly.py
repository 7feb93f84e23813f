from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from ..attendance.model import AttendanceRecord
from ..core.constants import WORK_WEEK_DAYS
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from .calculator.base import HoursCalculator
from .calculator.lunch_calculator import LunchBreakHoursCalculator

logger = logging.getLogger(__name__)


@dataclass
class WeeklyReportRow:
    employee: Employee
    days_by_date: Dict[date, Optional[AttendanceRecord]]
    total_hours: float = 0.0

    def as_dict(self) -> dict:
        return {
            "employee": {
                "id": self.employee.employee_id,
                "first_name": self.employee.first_name,
                "last_name": self.employee.last_name,
                "role": self.employee.role,
            },
            "days": {
                d.isoformat(): (
                    {
                        "id": r.record_id,
                        "check_in": r.check_in.isoformat(),
                        "check_out": r.check_out.isoformat() if r.check_out else None,
                        "status": r.status.value,
                    }
                    if r
                    else None
                )
                for d, r in self.days_by_date.items()
            },
            "total_hours": round(self.total_hours, 2),
        }


@dataclass
class WeeklyReport:
    start: date
    end: date
    rows: List[WeeklyReportRow] = field(default_factory=list)


def week_days(week_start: date) -> List[date]:
    return [week_start + timedelta(days=i) for i in range(WORK_WEEK_DAYS)]


def build_weekly_report(
    roster: Iterable[Employee],
    week_records: Iterable[AttendanceRecord],
    week_start: date,
    *,
    calculator: Optional[HoursCalculator] = None,
) -> List[WeeklyReportRow]:
    """Group a week of records by active employee, Monday to Friday.

    Every active employee gets a row, even without records. If an
    employee has several records on one day, the most recently created
    one fills the cell and is the only one counted in ``total_hours``.
    Records the calculator rejects are logged and left out of the total.
    """
    calculator = calculator or LunchBreakHoursCalculator()
    days = week_days(week_start)

    rows: Dict[str, WeeklyReportRow] = {}
    for employee in roster:
        if not employee.is_active or employee.employee_id in rows:
            continue
        rows[employee.employee_id] = WeeklyReportRow(
            employee=employee,
            days_by_date={d: None for d in days},
        )

    for record in week_records:
        row = rows.get(record.employee_id)
        if row is None:
            logger.warning(
                "Record %s references employee %s who is not on the active roster; skipped",
                record.record_id,
                record.employee_id,
            )
            continue
        if record.work_date not in row.days_by_date:
            logger.debug("Record %s dated %s is outside the report week", record.record_id, record.work_date)
            continue
        current = row.days_by_date[record.work_date]
        if current is None or record.created_key >= current.created_key:
            row.days_by_date[record.work_date] = record

    for row in rows.values():
        total = 0.0
        for record in row.days_by_date.values():
            if record is None or record.check_out is None:
                continue
            try:
                total += calculator.net_hours(record.check_in, record.check_out)
            except ValidationError as exc:
                logger.warning("Skipping record %s in weekly report: %s", record.record_id, exc)
        row.total_hours = total

    return list(rows.values())
