from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence

from ..common.datetime_utils import anchor_on, now_local, parse_time_of_day
from ..common.validators import require_time_range
from ..core.enums import DailyStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeDirectory
from ..shifts.model import ShiftConfig
from .classifier import classify_check_in
from .model import AttendanceRecord
from .projector import latest_record_for, project_daily_status
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KioskEntry:
    employee: Employee
    status: DailyStatus
    record: Optional[AttendanceRecord]

    def as_dict(self) -> dict:
        return {
            "employee_id": self.employee.employee_id,
            "name": self.employee.display_name,
            "role": self.employee.role,
            "status": self.status.value,
            "record_id": self.record.record_id if self.record else None,
            "check_in": self.record.check_in.isoformat() if self.record else None,
            "check_out": self.record.check_out.isoformat() if self.record and self.record.check_out else None,
        }


def record_as_dict(r: AttendanceRecord) -> dict:
    return {
        "id": r.record_id,
        "employee_id": r.employee_id,
        "date": r.work_date.isoformat(),
        "check_in": r.check_in.isoformat(),
        "check_out": r.check_out.isoformat() if r.check_out else None,
        "status": r.status.value,
    }


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeDirectory,
        *,
        shift: ShiftConfig | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._shift = shift or ShiftConfig()

    def _require_active_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        if not employee.is_active:
            raise ValidationError(f"Employee {employee_id} is inactive")
        return employee

    def _require_record(self, record_id: str) -> AttendanceRecord:
        record = self._attendance.get_by_id(record_id)
        if not record:
            raise NotFoundError(f"Attendance record {record_id} does not exist")
        return record

    def todays_record(self, employee_id: str, today: date) -> Optional[AttendanceRecord]:
        return latest_record_for(employee_id, self._attendance.get_for_date(today))

    def _open_record_from_yesterday(self, employee_id: str, today: date) -> Optional[AttendanceRecord]:
        record = self.todays_record(employee_id, today - timedelta(days=1))
        return record if record and record.is_open else None

    def status_for(self, employee_id: str, today: date) -> DailyStatus:
        return project_daily_status(employee_id, self._attendance.get_for_date(today))

    def check_in(self, employee_id: str, *, now: datetime | None = None) -> str:
        now = now or now_local()
        today = now.date()

        self._require_active_employee(employee_id)
        if self.status_for(employee_id, today) != DailyStatus.PENDING:
            raise ValidationError("Employee already checked in today")

        status = classify_check_in(now, self._shift)
        record_id = self._attendance.create_checkin(
            employee_id=employee_id,
            work_date=today,
            check_in=now,
            status=status,
        )
        logger.info("Check-in %s for employee %s at %s (%s)", record_id, employee_id, now.isoformat(), status.value)
        return record_id

    def check_out(self, employee_id: str, *, now: datetime | None = None) -> str:
        """Close today's open record.

        A shift that crosses midnight is closed on the previous day's open
        record; the record keeps its check-in date.
        """
        now = now or now_local()

        record = self.todays_record(employee_id, now.date())
        if not record:
            record = self._open_record_from_yesterday(employee_id, now.date())
        if not record:
            raise ValidationError("Employee has not checked in today")
        if not record.is_open:
            raise ValidationError("Employee already checked out today")
        require_time_range(record.check_in, now, record_id=record.record_id)

        self._attendance.update_checkout(record_id=record.record_id, check_out=now)
        logger.info("Check-out %s for employee %s at %s", record.record_id, employee_id, now.isoformat())
        return record.record_id

    def toggle(self, employee_id: str, *, now: datetime | None = None) -> dict:
        """Kiosk button: check in when pending, check out when working."""
        now = now or now_local()
        status = self.status_for(employee_id, now.date())
        if status == DailyStatus.PENDING:
            return {"action": "check_in", "record_id": self.check_in(employee_id, now=now)}
        if status == DailyStatus.WORKING:
            return {"action": "check_out", "record_id": self.check_out(employee_id, now=now)}
        raise ValidationError("Workday already completed")

    def kiosk_board(self, today: date | None = None) -> List[KioskEntry]:
        today = today or now_local().date()
        records = self._attendance.get_for_date(today)
        board = []
        for employee in self._employees.list_active():
            record = latest_record_for(employee.employee_id, records)
            board.append(
                KioskEntry(
                    employee=employee,
                    status=project_daily_status(employee.employee_id, records),
                    record=record,
                )
            )
        return board

    def daily_log(self, day: date) -> Sequence[AttendanceRecord]:
        records = list(self._attendance.get_for_date(day))
        records.sort(key=lambda r: r.check_in, reverse=True)
        return records

    def correct_record(
        self,
        record_id: str,
        *,
        check_in: str,
        check_out: str | None = None,
        rederive_status: bool = False,
    ) -> AttendanceRecord:
        """Admin correction of a missed or wrong punch.

        Times are HH:MM on the record's own date; the date never changes.
        ``check_out=None`` leaves the stored check-out as it is. The status
        is only recomputed when ``rederive_status`` is set.
        """
        record = self._require_record(record_id)
        tz = record.check_in.tzinfo

        new_in = anchor_on(record.work_date, parse_time_of_day(check_in), tz)
        new_out = record.check_out
        if check_out:
            new_out = anchor_on(record.work_date, parse_time_of_day(check_out), tz)
        new_status = classify_check_in(new_in, self._shift) if rederive_status else record.status

        # Constructing the record validates the new range.
        updated = replace(record, check_in=new_in, check_out=new_out, status=new_status)
        self._attendance.update_times(
            record_id=record_id,
            check_in=updated.check_in,
            check_out=updated.check_out,
            status=updated.status,
        )
        logger.info("Corrected record %s: %s - %s (%s)", record_id, new_in, new_out, new_status.value)
        return updated

    def delete_record(self, record_id: str) -> None:
        if not self._attendance.delete(record_id):
            raise NotFoundError(f"Attendance record {record_id} does not exist")
        logger.info("Deleted attendance record %s", record_id)
