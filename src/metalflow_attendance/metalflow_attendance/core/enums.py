from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status stored on an attendance record at check-in time."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"


class DailyStatus(str, Enum):
    """Kiosk state of an employee for the current day."""

    PENDING = "pending"
    WORKING = "working"
    COMPLETED = "completed"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class WindowBy(str, Enum):
    """How the trailing statistics window is selected."""

    RECORD_COUNT = "recordCount"
    CALENDAR_DAYS = "calendarDays"
