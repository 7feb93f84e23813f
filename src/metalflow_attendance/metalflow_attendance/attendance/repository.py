from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Record store for attendance logs.

    At most one record per employee per day is expected, but readers must
    cope with duplicates (see ``projector.latest_record_for``).
    """

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_recent_for_employee(self, employee_id: str, limit: int) -> Sequence[AttendanceRecord]:
        """Newest ``limit`` records of one employee, newest first."""

        raise NotImplementedError

    def get_for_employee_between(self, employee_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_between(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in: datetime,
        status: AttendanceStatus,
    ) -> str:
        raise NotImplementedError

    def update_checkout(self, *, record_id: str, check_out: datetime) -> bool:
        raise NotImplementedError

    def update_times(
        self,
        *,
        record_id: str,
        check_in: datetime,
        check_out: Optional[datetime],
        status: AttendanceStatus,
    ) -> bool:
        """Admin-only correction of a record's times (and status)."""

        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError
