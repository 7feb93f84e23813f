"""Example: the attendance engine without Flask or MySQL.

Classify a check-in, compute net hours and build a one-employee weekly report.
"""

from datetime import date, datetime, time

from src.metalflow_attendance.metalflow_attendance.attendance.classifier import classify_check_in
from src.metalflow_attendance.metalflow_attendance.attendance.model import AttendanceRecord
from src.metalflow_attendance.metalflow_attendance.common.datetime_utils import week_bounds
from src.metalflow_attendance.metalflow_attendance.employees.model import Employee
from src.metalflow_attendance.metalflow_attendance.reports.calculator.lunch_calculator import compute_net_hours
from src.metalflow_attendance.metalflow_attendance.reports.weekly import build_weekly_report
from src.metalflow_attendance.metalflow_attendance.shifts.model import LunchConfig, ShiftConfig


def main():
    shift = ShiftConfig.single_cutoff(time(9, 0))
    lunch = LunchConfig()

    check_in = datetime(2026, 3, 2, 8, 55)
    check_out = datetime(2026, 3, 2, 17, 30)
    status = classify_check_in(check_in, shift)
    print("status:", status.value)
    print("net hours:", compute_net_hours(check_in, check_out, lunch))

    employee = Employee(employee_id="e1", first_name="Ana", last_name="Paz", role="Soldadora")
    record = AttendanceRecord(
        record_id="r1",
        employee_id="e1",
        work_date=check_in.date(),
        check_in=check_in,
        check_out=check_out,
        status=status,
    )
    monday, _ = week_bounds(date(2026, 3, 4))
    for row in build_weekly_report([employee], [record], monday):
        print(row.as_dict())


if __name__ == "__main__":
    main()
