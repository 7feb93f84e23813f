from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.metalflow_attendance.metalflow_attendance.attendance.model import AttendanceRecord
from src.metalflow_attendance.metalflow_attendance.core.enums import AttendanceStatus, EmployeeStatus
from src.metalflow_attendance.metalflow_attendance.employees.model import Employee


class InMemoryEmployees:
    def __init__(self, employees):
        self._employees = list(employees)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self._employees if e.employee_id == employee_id), None)

    def list_active(self):
        return [e for e in self._employees if e.is_active]


class InMemoryAttendance:
    def __init__(self, records=()):
        self.records: dict[str, AttendanceRecord] = {r.record_id: r for r in records}
        self._id = 0

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self.records.get(record_id)

    def get_recent_for_employee(self, employee_id: str, limit: int):
        items = [r for r in self.records.values() if r.employee_id == employee_id]
        items.sort(key=lambda r: r.created_key, reverse=True)
        return items[:limit]

    def get_for_employee_between(self, employee_id: str, start: date, end: date):
        return [r for r in self.get_between(start, end) if r.employee_id == employee_id]

    def get_for_date(self, work_date: date):
        return [r for r in self.records.values() if r.work_date == work_date]

    def get_between(self, start: date, end: date):
        items = [r for r in self.records.values() if start <= r.work_date <= end]
        items.sort(key=lambda r: (r.work_date, r.check_in))
        return items

    def create_checkin(self, *, employee_id: str, work_date: date, check_in: datetime, status: AttendanceStatus) -> str:
        self._id += 1
        record_id = f"rec-{self._id}"
        self.records[record_id] = AttendanceRecord(
            record_id=record_id,
            employee_id=employee_id,
            work_date=work_date,
            check_in=check_in,
            check_out=None,
            status=status,
            created_at=check_in,
        )
        return record_id

    def update_checkout(self, *, record_id: str, check_out: datetime) -> bool:
        record = self.records.get(record_id)
        if not record:
            return False
        self.records[record_id] = replace(record, check_out=check_out)
        return True

    def update_times(self, *, record_id: str, check_in: datetime, check_out, status: AttendanceStatus) -> bool:
        record = self.records.get(record_id)
        if not record:
            return False
        self.records[record_id] = replace(record, check_in=check_in, check_out=check_out, status=status)
        return True

    def delete(self, record_id: str) -> bool:
        return self.records.pop(record_id, None) is not None


@pytest.fixture
def fixed_now() -> datetime:
    # Monday 2026-03-02, before the 06:40 morning cutoff
    return datetime(2026, 3, 2, 6, 30)


@pytest.fixture
def roster() -> list[Employee]:
    return [
        Employee(employee_id="e1", first_name="Ana", last_name="Paz", role="Soldadora"),
        Employee(employee_id="e2", first_name="Bruno", last_name="Diaz", role="Tornero"),
        Employee(
            employee_id="e3",
            first_name="Carla",
            last_name="Ruiz",
            role="Pintora",
            status=EmployeeStatus.INACTIVE,
        ),
    ]


@pytest.fixture
def employee_directory(roster) -> InMemoryEmployees:
    return InMemoryEmployees(roster)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def make_record():
    counter = {"n": 0}

    def _make(
        employee_id: str,
        check_in: datetime,
        check_out: Optional[datetime] = None,
        status: AttendanceStatus = AttendanceStatus.PRESENT,
        *,
        created_at: Optional[datetime] = None,
    ) -> AttendanceRecord:
        counter["n"] += 1
        return AttendanceRecord(
            record_id=f"r{counter['n']}",
            employee_id=employee_id,
            work_date=check_in.date(),
            check_in=check_in,
            check_out=check_out,
            status=status,
            created_at=created_at,
        )

    return _make
