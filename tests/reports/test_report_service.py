from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from src.metalflow_attendance.metalflow_attendance.core.enums import AttendanceStatus, WindowBy
from src.metalflow_attendance.metalflow_attendance.core.exceptions import NotFoundError, ValidationError
from src.metalflow_attendance.metalflow_attendance.reports.service import ReportService


@pytest.fixture
def seeded_repo(attendance_repo, make_record):
    # e1: one record every day for 40 days ending Sunday 2026-03-08,
    # oldest 10 late, the rest on time
    end = datetime(2026, 3, 8, 6, 30)
    for i in range(40):
        check_in = end - timedelta(days=i)
        status = AttendanceStatus.LATE if i >= 30 else AttendanceStatus.PRESENT
        rec = make_record("e1", check_in, check_in + timedelta(hours=9), status=status, created_at=check_in)
        attendance_repo.records[rec.record_id] = rec
    return attendance_repo


def test_stats_by_record_count_takes_newest_records(seeded_repo, employee_directory):
    svc = ReportService(seeded_repo, employee_directory)

    stats = svc.employee_stats("e1")

    assert stats.total_days == 30
    assert stats.present_count == 30
    assert stats.punctuality == 100


def test_stats_by_record_count_custom_window(seeded_repo, employee_directory):
    svc = ReportService(seeded_repo, employee_directory)

    stats = svc.employee_stats("e1", window=40)

    assert stats.total_days == 40
    assert stats.late_count == 10
    assert stats.punctuality == 75


def test_record_window_differs_from_calendar_window_for_sparse_attendance(attendance_repo, employee_directory, make_record):
    # Two records 60 days apart
    for check_in in (datetime(2026, 1, 5, 6, 30), datetime(2026, 3, 6, 7, 30)):
        status = AttendanceStatus.LATE if check_in.hour == 7 else AttendanceStatus.PRESENT
        rec = make_record("e2", check_in, status=status)
        attendance_repo.records[rec.record_id] = rec
    svc = ReportService(attendance_repo, employee_directory)

    by_records = svc.employee_stats("e2", window_by=WindowBy.RECORD_COUNT)
    by_days = svc.employee_stats("e2", window_by=WindowBy.CALENDAR_DAYS, today=date(2026, 3, 8))

    assert by_records.total_days == 2
    assert by_days.total_days == 1
    assert by_days.late_count == 1


def test_calendar_window_can_count_missing_weekdays(attendance_repo, employee_directory, make_record):
    rec = make_record("e2", datetime(2026, 3, 6, 6, 30))
    attendance_repo.records[rec.record_id] = rec
    svc = ReportService(attendance_repo, employee_directory)

    stats = svc.employee_stats(
        "e2",
        window_by=WindowBy.CALENDAR_DAYS,
        window=7,
        today=date(2026, 3, 8),
        count_missing_days_as_absent=True,
    )

    # Mon..Fri, only Friday attended
    assert stats.total_days == 5
    assert stats.absent_count == 4
    assert stats.absenteeism == 80


def test_missing_days_need_calendar_window(attendance_repo, employee_directory):
    svc = ReportService(attendance_repo, employee_directory)

    with pytest.raises(ValidationError):
        svc.employee_stats("e1", count_missing_days_as_absent=True)


def test_stats_for_inactive_employee_still_available(attendance_repo, employee_directory, make_record):
    rec = make_record("e3", datetime(2026, 3, 2, 6, 30), status=AttendanceStatus.LATE)
    attendance_repo.records[rec.record_id] = rec

    stats = ReportService(attendance_repo, employee_directory).employee_stats("e3")

    assert stats.late_count == 1


def test_stats_unknown_employee(attendance_repo, employee_directory):
    with pytest.raises(NotFoundError):
        ReportService(attendance_repo, employee_directory).employee_stats("ghost")


def test_weekly_report_from_sunday(seeded_repo, employee_directory):
    svc = ReportService(seeded_repo, employee_directory)

    report = svc.weekly_report(today=date(2026, 3, 8))

    assert (report.start, report.end) == (date(2026, 3, 2), date(2026, 3, 6))
    assert [r.employee.employee_id for r in report.rows] == ["e1", "e2"]
    # 06:30-15:30 every weekday: 9h gross - 1h lunch
    assert report.rows[0].total_hours == pytest.approx(40.0)
    assert report.rows[1].total_hours == 0


def test_weekly_report_csv_rows(seeded_repo, employee_directory):
    svc = ReportService(seeded_repo, employee_directory)
    report = svc.weekly_report(today=date(2026, 3, 4))

    rows = svc.weekly_report_csv_rows(report)

    assert rows[0]["employee"] == "Paz, Ana"
    assert rows[0]["mon"] == "06:30-15:30"
    assert rows[0]["total_hours"] == "40.00"
    assert rows[1]["fri"] == "-"
    assert rows[1]["total_hours"] == "0.00"


def test_stats_zero_window_rejected(seeded_repo, employee_directory):
    svc = ReportService(seeded_repo, employee_directory)

    with pytest.raises(ValidationError):
        svc.employee_stats("e1", window=0)
