from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_STATS_WINDOW
from .core.enums import WindowBy
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeDirectory
from .employees.repository import EmployeeDirectory
from .reports.calculator.lunch_calculator import LunchBreakHoursCalculator
from .reports.service import ReportService
from .shifts.model import LunchConfig, ShiftConfig


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    employees_repo: EmployeeDirectory

    attendance_service: AttendanceService
    report_service: ReportService


def wire(
    attendance_repo: AttendanceRepository,
    employees_repo: EmployeeDirectory,
    *,
    shift: ShiftConfig,
    lunch: LunchConfig,
    stats_window: int = DEFAULT_STATS_WINDOW,
    window_by: WindowBy = WindowBy.RECORD_COUNT,
) -> Container:
    attendance_service = AttendanceService(attendance_repo, employees_repo, shift=shift)
    report_service = ReportService(
        attendance_repo,
        employees_repo,
        calculator=LunchBreakHoursCalculator(lunch),
        stats_window=stats_window,
        window_by=window_by,
    )
    return Container(
        attendance_repo=attendance_repo,
        employees_repo=employees_repo,
        attendance_service=attendance_service,
        report_service=report_service,
    )


def build_container(
    *,
    db_config: dict,
    shift: ShiftConfig,
    lunch: LunchConfig,
    stats_window: int = DEFAULT_STATS_WINDOW,
    window_by: WindowBy = WindowBy.RECORD_COUNT,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return wire(
        MySQLAttendanceRepository(conn),
        MySQLEmployeeDirectory(conn),
        shift=shift,
        lunch=lunch,
        stats_window=stats_window,
        window_by=window_by,
    )
