from datetime import date, datetime, timedelta

import pytest

from src.metalflow_attendance.metalflow_attendance.common.datetime_utils import week_bounds
from src.metalflow_attendance.metalflow_attendance.core.exceptions import ValidationError
from src.metalflow_attendance.metalflow_attendance.reports.calculator.base import HoursCalculator
from src.metalflow_attendance.metalflow_attendance.reports.weekly import build_weekly_report

MONDAY = date(2026, 3, 2)


@pytest.mark.parametrize("offset", range(7))
def test_week_bounds_for_every_weekday(offset):
    today = MONDAY + timedelta(days=offset)

    monday, friday = week_bounds(today)

    assert monday == MONDAY
    assert friday == date(2026, 3, 6)


def test_week_bounds_sunday_goes_back_six_days():
    sunday = date(2026, 3, 8)

    assert week_bounds(sunday)[0] == sunday - timedelta(days=6)


def test_week_bounds_across_month_boundary():
    assert week_bounds(date(2026, 3, 1)) == (date(2026, 2, 23), date(2026, 2, 27))


def test_report_groups_by_employee_in_roster_order(roster, make_record):
    records = [
        # returned out of order by the store
        make_record("e2", datetime(2026, 3, 4, 8, 0), datetime(2026, 3, 4, 17, 0)),
        make_record("e1", datetime(2026, 3, 3, 8, 0), datetime(2026, 3, 3, 17, 0)),
        make_record("e1", datetime(2026, 3, 2, 6, 30), datetime(2026, 3, 2, 12, 0)),
    ]

    rows = build_weekly_report(roster, records, MONDAY)

    assert [r.employee.employee_id for r in rows] == ["e1", "e2"]
    ana = rows[0]
    assert list(ana.days_by_date) == [MONDAY + timedelta(days=i) for i in range(5)]
    assert ana.days_by_date[date(2026, 3, 2)].check_in == datetime(2026, 3, 2, 6, 30)
    assert ana.days_by_date[date(2026, 3, 4)] is None
    assert ana.total_hours == pytest.approx(5.5 + 8.0)
    assert rows[1].total_hours == pytest.approx(8.0)


def test_employee_without_records_still_listed(roster):
    rows = build_weekly_report(roster, [], MONDAY)

    assert [r.employee.employee_id for r in rows] == ["e1", "e2"]
    assert all(r.total_hours == 0 for r in rows)
    assert all(v is None for r in rows for v in r.days_by_date.values())


def test_open_records_shown_but_not_counted(roster, make_record):
    open_rec = make_record("e1", datetime(2026, 3, 5, 8, 0))

    rows = build_weekly_report(roster, [open_rec], MONDAY)

    assert rows[0].days_by_date[date(2026, 3, 5)] is open_rec
    assert rows[0].total_hours == 0


def test_record_of_unknown_employee_is_skipped_with_warning(roster, make_record, caplog):
    stray = make_record("ghost", datetime(2026, 3, 2, 8, 0), datetime(2026, 3, 2, 17, 0))
    inactive = make_record("e3", datetime(2026, 3, 2, 8, 0), datetime(2026, 3, 2, 17, 0))

    with caplog.at_level("WARNING"):
        rows = build_weekly_report(roster, [stray, inactive], MONDAY)

    assert len(rows) == 2
    assert "ghost" in caplog.text
    assert "e3" in caplog.text


def test_duplicate_day_uses_latest_record(roster, make_record):
    first = make_record(
        "e1", datetime(2026, 3, 2, 8, 0), datetime(2026, 3, 2, 9, 0), created_at=datetime(2026, 3, 2, 8, 0)
    )
    second = make_record(
        "e1", datetime(2026, 3, 2, 8, 0), datetime(2026, 3, 2, 17, 0), created_at=datetime(2026, 3, 2, 8, 1)
    )

    rows = build_weekly_report(roster, [second, first], MONDAY)

    assert rows[0].days_by_date[MONDAY] is second
    assert rows[0].total_hours == pytest.approx(8.0)


def test_weekend_records_are_ignored(roster, make_record):
    saturday = make_record("e1", datetime(2026, 3, 7, 8, 0), datetime(2026, 3, 7, 12, 0))

    rows = build_weekly_report(roster, [saturday], MONDAY)

    assert rows[0].total_hours == 0


class RejectingCalculator(HoursCalculator):
    """Rejects any day longer than four hours."""

    def net_hours(self, check_in, check_out):
        hours = (check_out - check_in).total_seconds() / 3600
        if hours > 4:
            raise ValidationError("shift too long")
        return hours


def test_rejected_record_skipped_and_logged(roster, make_record, caplog):
    ok = make_record("e1", datetime(2026, 3, 2, 8, 0), datetime(2026, 3, 2, 11, 0))
    bad = make_record("e1", datetime(2026, 3, 3, 8, 0), datetime(2026, 3, 3, 17, 0))

    with caplog.at_level("WARNING"):
        rows = build_weekly_report(roster, [ok, bad], MONDAY, calculator=RejectingCalculator())

    assert rows[0].total_hours == pytest.approx(3.0)
    assert rows[0].days_by_date[date(2026, 3, 3)] is bad
    assert bad.record_id in caplog.text


def test_row_as_dict(roster, make_record):
    rec = make_record("e1", datetime(2026, 3, 2, 8, 0), datetime(2026, 3, 2, 17, 0))

    data = build_weekly_report(roster, [rec], MONDAY)[0].as_dict()

    assert data["employee"]["id"] == "e1"
    assert data["days"]["2026-03-02"]["status"] == "present"
    assert data["days"]["2026-03-03"] is None
    assert data["total_hours"] == 8.0
