from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_hhmm, now_local, week_bounds
from ..core.constants import DEFAULT_STATS_WINDOW
from ..core.enums import WindowBy
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeDirectory
from .calculator.base import HoursCalculator
from .calculator.lunch_calculator import LunchBreakHoursCalculator
from .stats import AttendanceStats, compute_stats, fill_absent_days, stats_from_statuses
from .weekly import WeeklyReport, build_weekly_report

WEEKDAY_LABELS = ["mon", "tue", "wed", "thu", "fri"]


class ReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeDirectory,
        *,
        calculator: Optional[HoursCalculator] = None,
        stats_window: int = DEFAULT_STATS_WINDOW,
        window_by: WindowBy = WindowBy.RECORD_COUNT,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or LunchBreakHoursCalculator()
        self._stats_window = int(stats_window)
        self._window_by = WindowBy(window_by)

    def employee_stats(
        self,
        employee_id: str,
        *,
        window_by: Optional[WindowBy] = None,
        window: Optional[int] = None,
        today: Optional[date] = None,
        count_missing_days_as_absent: bool = False,
    ) -> AttendanceStats:
        """Rolling statistics for one employee (inactive ones included).

        ``RECORD_COUNT`` takes the newest ``window`` records whatever their
        dates. ``CALENDAR_DAYS`` takes records dated within the last
        ``window`` days up to ``today``; only there can record-less
        weekdays be counted as absences.
        """
        window_by = WindowBy(window_by or self._window_by)
        window = self._stats_window if window is None else int(window)
        if window <= 0:
            raise ValidationError("Statistics window must be positive")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} does not exist")

        if window_by == WindowBy.RECORD_COUNT:
            if count_missing_days_as_absent:
                raise ValidationError("Missing days can only be counted with a calendar window")
            return compute_stats(self._attendance.get_recent_for_employee(employee_id, window))

        end = today or now_local().date()
        start = end - timedelta(days=window - 1)
        records = self._attendance.get_for_employee_between(employee_id, start, end)
        if count_missing_days_as_absent:
            return stats_from_statuses(fill_absent_days(records, start, end))
        return compute_stats(records)

    def weekly_report(self, today: Optional[date] = None) -> WeeklyReport:
        start, end = week_bounds(today or now_local().date())
        records = self._attendance.get_between(start, end)
        rows = build_weekly_report(
            self._employees.list_active(),
            records,
            start,
            calculator=self._calculator,
        )
        return WeeklyReport(start=start, end=end, rows=rows)

    def weekly_report_csv_rows(self, report: WeeklyReport) -> List[dict]:
        out = []
        for row in report.rows:
            flat = {
                "employee": row.employee.display_name,
                "role": row.employee.role,
            }
            for label, (_, record) in zip(WEEKDAY_LABELS, sorted(row.days_by_date.items())):
                flat[label] = f"{format_hhmm(record.check_in)}-{format_hhmm(record.check_out)}" if record else "-"
            flat["total_hours"] = f"{row.total_hours:.2f}"
            out.append(flat)
        return out
