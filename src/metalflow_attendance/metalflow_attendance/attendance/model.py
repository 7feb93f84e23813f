from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.validators import require_time_range
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one work day.

    ``work_date`` is fixed at check-in. ``status`` is decided at check-in
    and is not recomputed when the times are corrected later. Invalid
    time ranges and a missing check-in are rejected here, at construction.
    """

    record_id: str
    employee_id: str
    work_date: date
    check_in: datetime
    check_out: Optional[datetime]
    status: AttendanceStatus
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not isinstance(self.status, AttendanceStatus):
            raise ValidationError(f"Unknown attendance status {self.status!r}", record_id=self.record_id)
        if not isinstance(self.check_in, datetime):
            raise ValidationError("Record has no check-in time", record_id=self.record_id)
        if self.check_out is not None and not isinstance(self.check_out, datetime):
            raise ValidationError(f"Invalid check-out {self.check_out!r}", record_id=self.record_id)
        require_time_range(self.check_in, self.check_out, record_id=self.record_id)

    @property
    def is_open(self) -> bool:
        return self.check_out is None

    @property
    def created_key(self) -> datetime:
        """Ordering key for "most recently created"."""
        return self.created_at or self.check_in
